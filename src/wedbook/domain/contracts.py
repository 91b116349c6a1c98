"""Precondition checks for programmer errors.

A ``None`` where a raw string is required is a bug in the caller, not bad
user input. It is raised immediately and never reported as a
:class:`~wedbook.parsing.result.ValidationError`.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class ContractViolationError(TypeError):
    """A caller broke a parser precondition (e.g. passed ``None``)."""


def require_non_null(value: T | None, name: str) -> T:
    """Return *value*, or raise :class:`ContractViolationError` if it is None."""
    if value is None:
        msg = f"{name} must not be None"
        raise ContractViolationError(msg)
    return value
