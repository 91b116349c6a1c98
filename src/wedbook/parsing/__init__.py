"""Parsing layer — raw strings in, ParseResult out."""

from wedbook.domain.contracts import ContractViolationError
from wedbook.parsing.fields import (
    MESSAGE_INVALID_INDEX,
    FieldValidator,
    constraint_message,
    parse_address,
    parse_datetime,
    parse_email,
    parse_field,
    parse_index,
    parse_job,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    parse_venue,
    parse_wedding_name,
)
from wedbook.parsing.result import ParseException, ParseResult, ValidationError

__all__ = [
    "MESSAGE_INVALID_INDEX",
    "ContractViolationError",
    "FieldValidator",
    "ParseException",
    "ParseResult",
    "ValidationError",
    "constraint_message",
    "parse_address",
    "parse_datetime",
    "parse_email",
    "parse_field",
    "parse_index",
    "parse_job",
    "parse_name",
    "parse_phone",
    "parse_tag",
    "parse_tags",
    "parse_venue",
    "parse_wedding_name",
]
