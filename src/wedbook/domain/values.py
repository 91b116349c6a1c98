"""FieldValue — base for all validated string value objects.

INVARIANT: A FieldValue instance always holds a value that satisfies its
class's ``is_valid`` predicate. Construction with anything else raises, so
validation and construction cannot be separated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, model_validator


class FieldValue(BaseModel):
    """Immutable wrapper around a validated string.

    Subclasses set :attr:`PATTERN` and :attr:`MESSAGE_CONSTRAINTS`, and may
    override :meth:`is_valid` when a regular expression is not enough.

    Attributes:
        value: The validated string, exactly as it was accepted.
    """

    model_config = {"frozen": True}

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".*", re.DOTALL)

    value: str

    def __init__(self, value: str) -> None:
        super().__init__(value=value)

    @classmethod
    def is_valid(cls, candidate: str) -> bool:
        """Return True if *candidate* satisfies this type's policy."""
        return cls.PATTERN.fullmatch(candidate) is not None

    @model_validator(mode="after")
    def check_policy(self) -> FieldValue:
        if not type(self).is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        return self

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> Self:
        """Copy this value; an *update* is rebuilt through the constructor.

        pydantic's ``model_copy`` skips validators, which would let an
        updated copy hold a value its own type rejects.
        """
        if not update:
            return super().model_copy(deep=deep)
        unknown = set(update) - {"value"}
        if unknown:
            raise ValueError(f"Unknown fields for {type(self).__name__}: {sorted(unknown)}")
        return type(self)(update["value"])

    def __str__(self) -> str:
        return self.value
