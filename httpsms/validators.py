"""Validation of the request payloads accepted by the message handlers.

Each rule is a pure function taking the field name and its value and
returning an error message, or ``None`` when the value passes. Rules are
grouped per field into a profile table, and a profile is evaluated into a
``FieldErrors`` mapping that serializes as ``{"field": ["message", ...]}``.
"""
import logging
import re
import uuid
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from httpsms.config import settings, validate_settings
from httpsms.entities import MESSAGE_EVENT_NAMES
from httpsms.logging_utils import LOGGER_NAME, setup_logging
from httpsms.models import (
    MessageEvent, MessageIndex, MessageOutstanding, MessageReceive, MessageSend
)

PHONE_NUMBER_PATTERN = re.compile(r'^\+[1-9]\d{1,14}$', re.ASCII)
NUMERIC_PATTERN = re.compile(r'^-?[0-9]+$')
UUID_PATTERN = re.compile(
    r'^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$'
)

Rule = Callable[[str, Any], Optional[str]]


class FieldErrors(dict):
    """Mapping of field name to the ordered messages of the rules it failed"""

    def add(self, field: str, message: str) -> None:
        self.setdefault(field, []).append(message)


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def required(field: str, value: Any) -> Optional[str]:
    if is_empty(value):
        return f"The {field} field is required"
    return None


def phone_number(field: str, value: Any) -> Optional[str]:
    """E.164: a plus sign, a non-zero digit, then up to 14 more digits"""
    if isinstance(value, str) and PHONE_NUMBER_PATTERN.fullmatch(value):
        return None
    return f"The '{field}' field must be a valid E.164 phone number: https://en.wikipedia.org/wiki/E.164"


def length(min_length: Optional[int] = None, max_length: Optional[int] = None) -> Rule:
    def rule(field: str, value: Any) -> Optional[str]:
        size = len(str(value))
        if min_length is not None and size < min_length:
            return f"The {field} field must be minimum {min_length} char"
        if max_length is not None and size > max_length:
            return f"The {field} field must be maximum {max_length} char"
        return None
    return rule


def to_number(value: Any) -> Optional[int]:
    """Parse an integer from an int or a string of digits, else None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and NUMERIC_PATTERN.fullmatch(value):
        return int(value)
    return None


def numeric_range(minimum: Optional[int] = None, maximum: Optional[int] = None) -> Rule:
    def rule(field: str, value: Any) -> Optional[str]:
        number = to_number(value)
        if number is None:
            return f"The {field} field must be numeric"
        if minimum is not None and number < minimum:
            return f"The {field} field value can not be less than {minimum}"
        if maximum is not None and number > maximum:
            return f"The {field} field value can not be greater than {maximum}"
        return None
    return rule


def one_of(choices: Sequence[str]) -> Rule:
    def rule(field: str, value: Any) -> Optional[str]:
        # Enum members compare by their value
        if any(value == choice for choice in choices):
            return None
        return f"The {field} field must be one of {', '.join(choices)}"
    return rule


def uuid_format(field: str, value: Any) -> Optional[str]:
    if isinstance(value, uuid.UUID):
        return None
    if isinstance(value, str) and UUID_PATTERN.fullmatch(value):
        return None
    return f"The {field} field must contain valid UUID"


def evaluate(values: Mapping[str, Any], rules: Mapping[str, Sequence[Rule]]) -> FieldErrors:
    """Run each field's rules against its value.

    An empty value only ever reports ``required``, and an empty optional
    field reports nothing. Every other failing rule adds its message.
    """
    errors = FieldErrors()
    for field, field_rules in rules.items():
        value = values.get(field)
        if is_empty(value):
            if required in field_rules:
                errors.add(field, required(field, value))
            continue
        for rule in field_rules:
            message = rule(field, value)
            if message is not None:
                errors.add(field, message)
    return errors


MESSAGE_CONTENT_RULES = (required, length(1, 500))
LIMIT_RULES = (required, numeric_range(1, 20))

MESSAGE_RECEIVE_RULES: Dict[str, Sequence[Rule]] = {
    'to': (required, phone_number),
    'from': (required, phone_number),
    'content': MESSAGE_CONTENT_RULES,
}

MESSAGE_SEND_RULES = MESSAGE_RECEIVE_RULES

MESSAGE_OUTSTANDING_RULES: Dict[str, Sequence[Rule]] = {
    'limit': LIMIT_RULES,
}

MESSAGE_INDEX_RULES: Dict[str, Sequence[Rule]] = {
    'limit': LIMIT_RULES,
    'skip': (required, numeric_range(minimum=0)),
    'from': (required, length(min_length=1)),
    'query': (length(max_length=100),),
    'to': (required, phone_number),
}

MESSAGE_EVENT_RULES: Dict[str, Sequence[Rule]] = {
    'event_name': (required, one_of(MESSAGE_EVENT_NAMES)),
    'messageID': (required, uuid_format),
}


class ValidationProfile(str, Enum):
    MESSAGE_RECEIVE = "message-receive"
    MESSAGE_SEND = "message-send"
    MESSAGE_OUTSTANDING = "message-outstanding"
    MESSAGE_INDEX = "message-index"
    MESSAGE_EVENT = "message-event"


def _expect(request: Any, request_type: type) -> None:
    if not isinstance(request, request_type):
        raise TypeError(
            f"expected {request_type.__name__}, got {type(request).__name__}"
        )


class MessageHandlerValidator:
    """Validates the requests handled by the message endpoints.

    Holds no state besides its logger, so one instance can be shared by
    every request handler.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        service = type(self).__name__
        self.logger.info(f"{service} created", extra={'service': service})

    def validate_message_receive(self, request: MessageReceive) -> FieldErrors:
        _expect(request, MessageReceive)
        return evaluate(
            {'to': request.to, 'from': request.from_, 'content': request.content},
            MESSAGE_RECEIVE_RULES
        )

    def validate_message_send(self, request: MessageSend) -> FieldErrors:
        _expect(request, MessageSend)
        return evaluate(
            {'to': request.to, 'from': request.from_, 'content': request.content},
            MESSAGE_SEND_RULES
        )

    def validate_message_outstanding(self, request: MessageOutstanding) -> FieldErrors:
        _expect(request, MessageOutstanding)
        return evaluate({'limit': request.limit}, MESSAGE_OUTSTANDING_RULES)

    def validate_message_index(self, request: MessageIndex) -> FieldErrors:
        _expect(request, MessageIndex)
        return evaluate(
            {
                'limit': request.limit,
                'skip': request.skip,
                'from': request.from_,
                'query': request.query,
                'to': request.to,
            },
            MESSAGE_INDEX_RULES
        )

    def validate_message_event(self, request: MessageEvent) -> FieldErrors:
        _expect(request, MessageEvent)
        return evaluate(
            {'event_name': request.event_name, 'messageID': request.message_id},
            MESSAGE_EVENT_RULES
        )

    def validate(self, profile: Union[ValidationProfile, str], request: Any) -> FieldErrors:
        """Validate ``request`` against the named profile"""
        try:
            profile = ValidationProfile(profile)
        except ValueError:
            raise ValueError(f"unknown validation profile: {profile!r}") from None
        method = getattr(self, 'validate_' + profile.name.lower())
        return method(request)


def build_validator() -> MessageHandlerValidator:
    """Create a validator logging through the configured httpsms logger"""
    validate_settings(settings)
    logger = setup_logging(settings.log_level, json_output=settings.log_json)
    return MessageHandlerValidator(logger)
