"""Errors raised when weights cannot form a distribution."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """The ways a weight sequence can be rejected."""

    INVALID_INPUT = "Weights sequence is empty/too long/unordered"
    INVALID_WEIGHT = "A weight is negative, too large or not a valid number"
    INSUFFICIENT_NON_ZERO = "Not enough weights > zero"
    OVERFLOW = "Overflow when summing weights"

    @property
    def message(self) -> str:
        """Human-readable description of this kind of failure."""
        return self.value


class WeightError(ValueError):
    """Raised when weights are empty, invalid, all zero or overflow when summed."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind})"