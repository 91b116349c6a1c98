"""Index — a position in a displayed list.

Users see one-based positions; internal lists are zero-based. Index hides
the conversion so callers never do ``n - 1`` arithmetic themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Index:
    """Immutable list position, stored zero-based.

    Construct through :meth:`from_zero_based` or :meth:`from_one_based`.
    Out-of-range values are programmer errors and raise ``ValueError``.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            msg = f"Index must be non-negative, got zero-based {self.zero_based}"
            raise ValueError(msg)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        if one_based < 1:
            msg = f"One-based index must be at least 1, got {one_based}"
            raise ValueError(msg)
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
