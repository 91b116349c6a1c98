"""Wedding fields: wedding name, venue and date."""

from __future__ import annotations

import re
from datetime import datetime

from wedbook.domain.values import FieldValue

DATETIME_FORMAT = "%d/%m/%Y"


class WeddingName(FieldValue):
    """The display name of a wedding, e.g. ``Alice & Bob's Wedding``."""

    MESSAGE_CONSTRAINTS = (
        "Wedding names should only contain alphanumeric characters, spaces, "
        "and the characters &, ' and -, and it should not be blank"
    )
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 &'-]*")


class Venue(FieldValue):
    """Where a wedding takes place. Any non-blank text."""

    MESSAGE_CONSTRAINTS = "Venues can take any values, and it should not be blank"
    PATTERN = re.compile(r"[^\s].*")


class Datetime(FieldValue):
    """The date of a wedding as ``DD/MM/YYYY``.

    The string form is kept verbatim; :meth:`as_datetime` gives the parsed date.
    """

    MESSAGE_CONSTRAINTS = (
        "Datetime should be in the format DD/MM/YYYY and must be a valid calendar date"
    )
    PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

    @classmethod
    def is_valid(cls, candidate: str) -> bool:
        if cls.PATTERN.fullmatch(candidate) is None:
            return False
        try:
            datetime.strptime(candidate, DATETIME_FORMAT)
        except ValueError:
            return False
        return True

    def as_datetime(self) -> datetime:
        return datetime.strptime(self.value, DATETIME_FORMAT)
