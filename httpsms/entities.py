from enum import Enum


class MessageEventName(str, Enum):
    """Events reported by the phone for an outgoing message"""
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"


MESSAGE_EVENT_NAMES = tuple(event.value for event in MessageEventName)
