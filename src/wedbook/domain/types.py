"""Field kinds and the value-type registry.

FIELD_TYPES is the single place that pairs a kind name with the value
object (and therefore the validity policy) it parses into.
"""

from __future__ import annotations

from enum import StrEnum

from wedbook.domain.person import Address, Email, Job, Name, Phone, Tag
from wedbook.domain.values import FieldValue
from wedbook.domain.wedding import Datetime, Venue, WeddingName


class FieldKind(StrEnum):
    """Every kind of raw input the parsers accept."""

    INDEX = "index"
    NAME = "name"
    PHONE = "phone"
    ADDRESS = "address"
    EMAIL = "email"
    JOB = "job"
    TAG = "tag"
    TAGS = "tags"
    WEDDING_NAME = "wedding_name"
    VENUE = "venue"
    DATETIME = "datetime"


FIELD_TYPES: dict[FieldKind, type[FieldValue]] = {
    FieldKind.NAME: Name,
    FieldKind.PHONE: Phone,
    FieldKind.ADDRESS: Address,
    FieldKind.EMAIL: Email,
    FieldKind.JOB: Job,
    FieldKind.TAG: Tag,
    FieldKind.WEDDING_NAME: WeddingName,
    FieldKind.VENUE: Venue,
    FieldKind.DATETIME: Datetime,
}

# Kinds whose raw input is validated without trimming.
UNTRIMMED_KINDS: frozenset[FieldKind] = frozenset({FieldKind.TAG})
