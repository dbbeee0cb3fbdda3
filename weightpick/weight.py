"""Numeric weight types: their zero and how their values are summed."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral, Real

from weightpick.errors import ErrorKind, WeightError


@dataclass(frozen=True)
class IntWeight:
    """Integer weights, optionally limited to a fixed bit width.

    With ``bits`` left as ``None`` the integers are unbounded and sums never
    overflow; otherwise a sum outside the representable range raises.
    """

    bits: int | None = None
    signed: bool = True

    def __post_init__(self) -> None:
        if self.bits is not None and self.bits <= 0:
            raise ValueError("bit width must be positive")

    @property
    def zero(self) -> int:
        """The weight that contributes nothing."""
        return 0

    @property
    def min_value(self) -> int | None:
        """Smallest representable value, or None when unbounded."""
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int | None:
        """Largest representable value, or None when unbounded."""
        if self.bits is None:
            return None
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    def checked_add(self, total: int, value: int) -> int:
        """Return ``total + value``, raising on overflow of the bit width."""
        result = total + value
        low, high = self.min_value, self.max_value
        if low is not None and high is not None and not low <= result <= high:
            raise WeightError(ErrorKind.OVERFLOW)
        return result


_FLOAT32 = struct.Struct("<f")


@dataclass(frozen=True)
class FloatWeight:
    """Floating-point weights in single (32) or double (64) precision.

    Sums never raise: overflow is represented by infinity.
    """

    bits: int = 64

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError("float weights are 32 or 64 bits wide")

    @property
    def zero(self) -> float:
        """The weight that contributes nothing."""
        return 0.0

    def _round(self, value: float) -> float:
        if self.bits == 64 or math.isnan(value) or math.isinf(value):
            return value
        try:
            return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def checked_add(self, total: float, value: float) -> float:
        """Return ``total + value`` rounded to this precision."""
        return self._round(float(total) + float(value))


IntOrFloat = IntWeight | FloatWeight

I8 = IntWeight(8, signed=True)
I16 = IntWeight(16, signed=True)
I32 = IntWeight(32, signed=True)
I64 = IntWeight(64, signed=True)
I128 = IntWeight(128, signed=True)
ISIZE = I64
U8 = IntWeight(8, signed=False)
U16 = IntWeight(16, signed=False)
U32 = IntWeight(32, signed=False)
U64 = IntWeight(64, signed=False)
U128 = IntWeight(128, signed=False)
USIZE = U64
F32 = FloatWeight(32)
F64 = FloatWeight(64)


def weight_type_for(weights: Sequence[Real]) -> IntWeight | FloatWeight:
    """Choose a weight type suited to the given values.

    Any float among them selects double-precision floats; otherwise
    unbounded integers are used. Values that are not real numbers raise
    ``TypeError``.
    """
    has_float = False
    for w in weights:
        if isinstance(w, Integral):
            continue
        if isinstance(w, Real):
            has_float = True
        else:
            raise TypeError(f"weight {w!r} is not a real number")
    return FloatWeight() if has_float else IntWeight()