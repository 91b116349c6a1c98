"""Field parsers — raw user strings into validated value objects.

Every scalar parser follows the same four steps:

1. Reject ``None`` with :class:`ContractViolationError` (a caller bug).
2. Trim surrounding whitespace (all kinds except tags).
3. Check the value type's predicate.
4. Return ``ParseResult.success`` with the value object, or
   ``ParseResult.failure`` with the type's fixed constraint message.

The parsers are pure functions: no state, no I/O, safe to call from any
thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from wedbook.domain.contracts import ContractViolationError, require_non_null
from wedbook.domain.index import Index
from wedbook.domain.person import Address, Email, Job, Name, Phone, Tag
from wedbook.domain.strings import is_non_zero_unsigned_integer
from wedbook.domain.types import FIELD_TYPES, UNTRIMMED_KINDS, FieldKind
from wedbook.domain.values import FieldValue
from wedbook.domain.wedding import Datetime, Venue, WeddingName
from wedbook.parsing.result import ParseResult

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

V = TypeVar("V", bound=FieldValue)


def _parse_value(kind: FieldKind, value_type: type[V], raw: str) -> ParseResult[V]:
    require_non_null(raw, kind.value)
    candidate = raw if kind in UNTRIMMED_KINDS else raw.strip()
    if not value_type.is_valid(candidate):
        logger.debug("Rejected %s input", kind.value)
        return ParseResult.failure(kind.value, value_type.MESSAGE_CONSTRAINTS)
    return ParseResult.success(kind.value, value_type(candidate))


def parse_index(raw: str) -> ParseResult[Index]:
    """Parse a one-based index such as ``"3"``.

    Leading and trailing whitespace is trimmed. Anything that is not an
    integer in ``1..2**31 - 1`` fails with :data:`MESSAGE_INVALID_INDEX`.
    """
    require_non_null(raw, FieldKind.INDEX.value)
    trimmed = raw.strip()
    if not is_non_zero_unsigned_integer(trimmed):
        logger.debug("Rejected %s input", FieldKind.INDEX.value)
        return ParseResult.failure(FieldKind.INDEX.value, MESSAGE_INVALID_INDEX)
    one_based = int(trimmed.lstrip("0"))
    return ParseResult.success(FieldKind.INDEX.value, Index.from_one_based(one_based))


def parse_name(raw: str) -> ParseResult[Name]:
    """Parse a person's name. Whitespace is trimmed."""
    return _parse_value(FieldKind.NAME, Name, raw)


def parse_phone(raw: str) -> ParseResult[Phone]:
    """Parse a phone number. Whitespace is trimmed."""
    return _parse_value(FieldKind.PHONE, Phone, raw)


def parse_address(raw: str) -> ParseResult[Address]:
    """Parse an address. Whitespace is trimmed."""
    return _parse_value(FieldKind.ADDRESS, Address, raw)


def parse_email(raw: str) -> ParseResult[Email]:
    """Parse an email address. Whitespace is trimmed."""
    return _parse_value(FieldKind.EMAIL, Email, raw)


def parse_job(raw: str) -> ParseResult[Job]:
    """Parse a job title. Whitespace is trimmed."""
    return _parse_value(FieldKind.JOB, Job, raw)


def parse_tag(raw: str) -> ParseResult[Tag]:
    """Parse a single tag.

    Unlike the other parsers the raw string is NOT trimmed, so
    ``" friend "`` is rejected.
    """
    return _parse_value(FieldKind.TAG, Tag, raw)


def parse_tags(raws: Iterable[str]) -> ParseResult[frozenset[Tag]]:
    """Parse a batch of tags into a set.

    Tags are parsed in iteration order. The first invalid tag aborts the
    batch and its failure is returned unchanged; no partial set is built.
    Duplicates collapse into one tag.
    A bare ``str`` is refused rather than split into single-character tags.
    """
    require_non_null(raws, FieldKind.TAGS.value)
    if isinstance(raws, str):
        raise ContractViolationError("tags must be a collection of strings, not a single string")
    tags: set[Tag] = set()
    for raw in raws:
        result = parse_tag(raw)
        if not result.ok:
            assert result.error is not None
            return ParseResult.failure(FieldKind.TAGS.value, result.error.message)
        tags.add(result.unwrap())
    return ParseResult.success(FieldKind.TAGS.value, frozenset(tags))


def parse_wedding_name(raw: str) -> ParseResult[WeddingName]:
    """Parse a wedding name. Whitespace is trimmed."""
    return _parse_value(FieldKind.WEDDING_NAME, WeddingName, raw)


def parse_venue(raw: str) -> ParseResult[Venue]:
    """Parse a venue. Whitespace is trimmed."""
    return _parse_value(FieldKind.VENUE, Venue, raw)


def parse_datetime(raw: str) -> ParseResult[Datetime]:
    """Parse a wedding date (``DD/MM/YYYY``). Whitespace is trimmed."""
    return _parse_value(FieldKind.DATETIME, Datetime, raw)


_SCALAR_PARSERS: dict[FieldKind, Callable[[str], ParseResult[Any]]] = {
    FieldKind.INDEX: parse_index,
    FieldKind.NAME: parse_name,
    FieldKind.PHONE: parse_phone,
    FieldKind.ADDRESS: parse_address,
    FieldKind.EMAIL: parse_email,
    FieldKind.JOB: parse_job,
    FieldKind.TAG: parse_tag,
    FieldKind.WEDDING_NAME: parse_wedding_name,
    FieldKind.VENUE: parse_venue,
    FieldKind.DATETIME: parse_datetime,
}


def parse_field(kind: FieldKind | str, raw: str) -> ParseResult[Any]:
    """Dispatch *raw* to the scalar parser for *kind*.

    Raises:
        ValueError: If *kind* names no scalar field (``"tags"`` included,
            since a batch is not a single raw string).
    """
    parser = _SCALAR_PARSERS.get(FieldKind(kind))
    if parser is None:
        msg = f"No scalar parser for field kind: {kind}"
        raise ValueError(msg)
    return parser(raw)


def constraint_message(kind: FieldKind | str) -> str:
    """The fixed message a failed parse of *kind* reports."""
    kind = FieldKind(kind)
    if kind is FieldKind.INDEX:
        return MESSAGE_INVALID_INDEX
    if kind is FieldKind.TAGS:
        return Tag.MESSAGE_CONSTRAINTS
    return FIELD_TYPES[kind].MESSAGE_CONSTRAINTS


class FieldValidator:
    """Stateless facade over the module-level parsers.

    For callers that prefer one object to pass around::

        result = FieldValidator.parse_email(raw)
        if result.ok:
            contact.email = result.value
    """

    parse_index = staticmethod(parse_index)
    parse_name = staticmethod(parse_name)
    parse_phone = staticmethod(parse_phone)
    parse_address = staticmethod(parse_address)
    parse_email = staticmethod(parse_email)
    parse_job = staticmethod(parse_job)
    parse_tag = staticmethod(parse_tag)
    parse_tags = staticmethod(parse_tags)
    parse_wedding_name = staticmethod(parse_wedding_name)
    parse_venue = staticmethod(parse_venue)
    parse_datetime = staticmethod(parse_datetime)
    parse_field = staticmethod(parse_field)
