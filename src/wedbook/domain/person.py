"""Person fields: name, phone, email, address, job and tag.

Every pattern is matched against the whole string with ``fullmatch`` and
accepts ASCII letters and digits only where it says "alphanumeric".
"""

from __future__ import annotations

import re

from wedbook.domain.values import FieldValue

_ALNUM = "[A-Za-z0-9]"


class Name(FieldValue):
    """A person's name."""

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    PATTERN = re.compile(rf"{_ALNUM}[A-Za-z0-9 ]*")


class Phone(FieldValue):
    """A phone number of at least three digits."""

    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN = re.compile(r"[0-9]{3,}")


class Address(FieldValue):
    """A free-form postal address."""

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    # Leading whitespace is rejected so a blank address cannot match.
    PATTERN = re.compile(r"[^\s].*")


_EMAIL_SPECIAL_CHARACTERS = "+_.-"

_LOCAL_PART = rf"{_ALNUM}+([{re.escape(_EMAIL_SPECIAL_CHARACTERS)}]{_ALNUM}+)*"
_DOMAIN_LABEL = rf"{_ALNUM}+(-{_ALNUM}+)*"
# The final label needs two adjacent alphanumerics, so "a-b" is not a valid TLD.
_DOMAIN_LAST_LABEL = rf"(?=[A-Za-z0-9-]*{_ALNUM}{{2}}){_DOMAIN_LABEL}"
_DOMAIN = rf"({_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}"


class Email(FieldValue):
    """An email address of the form ``local-part@domain``."""

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        f"characters, excluding the parentheses, ({_EMAIL_SPECIAL_CHARACTERS}). The local-part "
        "may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    PATTERN = re.compile(rf"{_LOCAL_PART}@{_DOMAIN}")


class Job(FieldValue):
    """A job title, e.g. ``Photographer`` or ``Wedding Planner``."""

    MESSAGE_CONSTRAINTS = (
        "Jobs should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    PATTERN = re.compile(rf"{_ALNUM}[A-Za-z0-9 ]*")


class Tag(FieldValue):
    """A single-word label attached to a person.

    Tags are validated untrimmed, so surrounding whitespace is rejected.
    """

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    PATTERN = re.compile(rf"{_ALNUM}+")

    def __str__(self) -> str:
        return f"[{self.value}]"
