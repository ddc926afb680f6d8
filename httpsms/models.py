import uuid
from pydantic import BaseModel, Field, StrictInt
from typing import Optional, Union


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class MessageReceive(BaseModel):
    """Message received by a phone and forwarded to the API"""
    to: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    content: Optional[str] = None
    
    def sanitize(self) -> "MessageReceive":
        return self.model_copy(update={
            'to': _strip(self.to),
            'from_': _strip(self.from_),
            'content': _strip(self.content)
        })
    
    class Config:
        populate_by_name = True

class MessageSend(BaseModel):
    """Message to be sent out through a phone"""
    to: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    content: Optional[str] = None
    
    def sanitize(self) -> "MessageSend":
        return self.model_copy(update={
            'to': _strip(self.to),
            'from_': _strip(self.from_),
            'content': _strip(self.content)
        })
    
    class Config:
        populate_by_name = True

class MessageOutstanding(BaseModel):
    limit: Optional[Union[StrictInt, str]] = None

class MessageIndex(BaseModel):
    """Query parameters for listing the messages of a conversation"""
    limit: Optional[Union[StrictInt, str]] = None
    skip: Optional[Union[StrictInt, str]] = None
    from_: Optional[str] = Field(None, alias="from")
    query: Optional[str] = None
    to: Optional[str] = None
    
    def sanitize(self) -> "MessageIndex":
        return self.model_copy(update={
            'limit': _strip(self.limit),
            'skip': _strip(self.skip),
            'from_': _strip(self.from_),
            'query': _strip(self.query),
            'to': _strip(self.to)
        })
    
    class Config:
        populate_by_name = True

class MessageEvent(BaseModel):
    event_name: Optional[str] = None
    message_id: Optional[Union[uuid.UUID, str]] = Field(None, alias="messageID")
    
    def sanitize(self) -> "MessageEvent":
        return self.model_copy(update={
            'event_name': _strip(self.event_name),
            'message_id': _strip(self.message_id)
        })
    
    class Config:
        populate_by_name = True
