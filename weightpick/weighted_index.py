"""Weighted sampling of indices with O(log N) draws."""

from __future__ import annotations

import bisect
import math
import random
from collections.abc import Iterable, Iterator
from typing import Any

from weightpick.errors import ErrorKind, WeightError
from weightpick.weight import FloatWeight, IntWeight, weight_type_for


class WeightedIndex:
    """A distribution over indices ``0..N-1`` chosen in proportion to weights.

    Elements with zero weight are never picked, even with float weights.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        weights: Iterable[Any],
        weight_type: IntWeight | FloatWeight | None = None,
    ) -> None:
        values = list(weights)
        if weight_type is None:
            weight_type = weight_type_for(values)
        self._weight_type = weight_type
        zero = weight_type.zero

        if not values:
            raise WeightError(ErrorKind.INVALID_INPUT)

        first, *rest = values
        # "not (w >= zero)" also rejects NaN, which compares false to everything.
        if not first >= zero:
            raise WeightError(ErrorKind.INVALID_WEIGHT)
        total = weight_type.checked_add(zero, first)

        cumulative: list[Any] = []
        for w in rest:
            if not w >= zero:
                raise WeightError(ErrorKind.INVALID_WEIGHT)
            cumulative.append(total)
            total = weight_type.checked_add(total, w)

        if total == zero:
            raise WeightError(ErrorKind.INSUFFICIENT_NON_ZERO)

        self._cumulative = cumulative
        self._total = total

    @property
    def weight_type(self) -> IntWeight | FloatWeight:
        """The numeric type the weights are held in."""
        return self._weight_type

    def _sub(self, a: Any, b: Any) -> Any:
        return self._weight_type.checked_add(a, -b)

    def update_weights(self, new_weights: Iterable[tuple[int, Any]]) -> None:
        """Replace some weights, given as ``(index, weight)`` pairs sorted by index.

        The number of weights is unchanged. On error the distribution is
        left as it was.
        """
        updates = list(new_weights)
        if not updates:
            return

        zero = self._weight_type.zero
        size = len(self._cumulative)
        total = self._total

        prev_index: int | None = None
        for index, w in updates:
            if prev_index is not None and prev_index >= index:
                raise WeightError(ErrorKind.INVALID_INPUT)
            if not w >= zero:
                raise WeightError(ErrorKind.INVALID_WEIGHT)
            if index < 0 or index > size:
                raise WeightError(ErrorKind.INVALID_INPUT)
            old = self.weight(index)
            total = self._sub(total, old)
            total = self._weight_type.checked_add(total, w)
            prev_index = index
        if total <= zero:
            raise WeightError(ErrorKind.INSUFFICIENT_NON_ZERO)

        pending = iter(updates)
        next_update = next(pending, None)
        first_index = updates[0][0]
        running = self._cumulative[first_index - 1] if first_index > 0 else zero
        prev_old = zero
        add = self._weight_type.checked_add
        for i in range(first_index, size):
            if next_update is not None and next_update[0] == i:
                running = add(running, next_update[1])
                next_update = next(pending, None)
            else:
                running = add(running, self._sub(self._cumulative[i], prev_old))
            prev_old = self._cumulative[i]
            self._cumulative[i] = running

        self._total = total

    def weight(self, index: int) -> Any | None:
        """Return the weight at ``index``, or None when it is out of range."""
        size = len(self._cumulative)
        if index < 0 or index > size:
            return None
        value = self._cumulative[index] if index < size else self._total
        if index > 0:
            value = self._sub(value, self._cumulative[index - 1])
        return value

    def weights(self) -> Iterator[Any]:
        """Yield the current weights lazily, in index order."""
        index = 0
        while (value := self.weight(index)) is not None:
            yield value
            index += 1

    def total_weight(self) -> Any:
        """Return the sum of all weights."""
        return self._total

    def sample(self, rng: random.Random | None = None) -> int:
        """Draw one index using ``rng`` (the module-level generator by default)."""
        source: Any = random if rng is None else rng
        if isinstance(self._weight_type, IntWeight):
            chosen: Any = source.randrange(self._total)
        else:
            total = float(self._total)
            if math.isinf(total):
                raise WeightError(ErrorKind.OVERFLOW)
            while True:
                chosen = source.random() * total
                if chosen < total:
                    break
        return bisect.bisect_right(self._cumulative, chosen)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedIndex):
            return NotImplemented
        return (
            self._weight_type == other._weight_type
            and self._cumulative == other._cumulative
            and self._total == other._total
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weights={list(self.weights())!r}, "
            f"weight_type={self._weight_type!r})"
        )