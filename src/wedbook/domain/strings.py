"""String predicates shared by the parsers."""

from __future__ import annotations

import re

from wedbook.domain.contracts import require_non_null

_UNSIGNED_DIGITS = re.compile(r"[0-9]+")

# Largest value a signed 32-bit integer can hold. Indexes above it are invalid.
MAX_INDEX_VALUE = 2**31 - 1
_MAX_INDEX_DIGITS = len(str(MAX_INDEX_VALUE))


def is_non_zero_unsigned_integer(s: str) -> bool:
    """Check whether *s* is the literal of an integer in ``1..MAX_INDEX_VALUE``.

    Only ASCII digits are accepted: no sign, no whitespace, no decimal point.
    Leading zeros are allowed, so ``"01"`` is valid.

    Examples:
        >>> is_non_zero_unsigned_integer("1")
        True
        >>> is_non_zero_unsigned_integer("0")
        False
        >>> is_non_zero_unsigned_integer("+1")
        False
        >>> is_non_zero_unsigned_integer("2147483648")
        False
    """
    require_non_null(s, "s")
    if _UNSIGNED_DIGITS.fullmatch(s) is None:
        return False
    significant = s.lstrip("0")
    # int() only ever sees at most _MAX_INDEX_DIGITS digits.
    if not significant or len(significant) > _MAX_INDEX_DIGITS:
        return False
    return int(significant) <= MAX_INDEX_VALUE
