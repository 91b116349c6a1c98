"""ParseResult and ValidationError — the parser return contract.

INVARIANT: Every parse function returns ParseResult for bad user input.
Exceptions are reserved for programmer errors (see
:mod:`wedbook.domain.contracts`).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ValidationError(BaseModel):
    """Why a raw value was rejected.

    ``message`` is the fixed constraint description of the field's type.
    Callers show it to users verbatim.
    """

    model_config = {"frozen": True}

    message: str


class ParseException(Exception):
    """Raised by :meth:`ParseResult.unwrap` on a failed result."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseResult(BaseModel, Generic[T]):
    """Outcome of parsing one raw field.

    Attributes:
        ok: Whether the raw value was accepted.
        field: Kind of field parsed (e.g. ``"email"``).
        value: The constructed value object on success.
        error: The validation failure if ``ok`` is False.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    field: str
    value: T | None = None
    error: ValidationError | None = None

    @classmethod
    def success(cls, field: str, value: Any) -> ParseResult[Any]:
        return cls(ok=True, field=field, value=value)

    @classmethod
    def failure(cls, field: str, message: str) -> ParseResult[Any]:
        return cls(ok=False, field=field, error=ValidationError(message=message))

    def unwrap(self) -> T:
        """Return the parsed value, or raise :class:`ParseException`."""
        if not self.ok:
            assert self.error is not None
            raise ParseException(self.error.message)
        return self.value  # type: ignore[return-value]
