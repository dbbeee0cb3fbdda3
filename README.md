# weightpick

`weightpick` picks an index from a list of weights. Each index is chosen
with probability proportional to its weight. A draw takes `O(log N)` time.
An index whose weight is zero is never picked, and this holds for
floating-point weights too.

## Installation

```
pip install weightpick
```

The package uses only the standard library.

## Usage

```python
import random

from weightpick.weighted_index import WeightedIndex

choices = ["a", "b", "c"]
dist = WeightedIndex([2, 1, 1])

rng = random.Random(42)
for _ in range(10):
    # 50% 'a', 25% 'b', 25% 'c'
    print(choices[dist.sample(rng)])
```

`sample(rng)` accepts any `random.Random` instance. Without one, it uses the
module-level generator in `random`.

## Weight types

The second argument of `WeightedIndex` sets how weights are stored and
summed. It is defined in `weightpick.weight`:

- `IntWeight(bits=None, signed=True)`: integer weights. When `bits` is
  `None` the integers are unbounded. When `bits` is given, any running sum
  that falls outside the range of that width raises an `OVERFLOW` error.
  Ready-made instances are `I8`, `I16`, `I32`, `I64`, `I128`, `ISIZE`,
  `U8`, `U16`, `U32`, `U64`, `U128` and `USIZE`.
- `FloatWeight(bits=64)`: floating-point weights of 32 or 64 bits, given
  as `F32` and `F64`. Sums never raise; an overflow becomes infinity.
  `F32` rounds each sum to single precision.

If you leave the argument out, `weight_type_for(weights)` picks the type.
It returns `FloatWeight()` if any weight is a float and `IntWeight()`
otherwise. It raises `TypeError` for a value that is not a real number.

```python
from weightpick.weight import U32, F32

WeightedIndex([1, 2, 3], U32)
WeightedIndex([0.7, 0.1, 0.1, 0.1], F32)
```

## Reading weights back

```python
dist = WeightedIndex([2, 1, 1])
dist.weight(0)         # 2
dist.weight(3)         # None, the index is out of range
list(dist.weights())   # [2, 1, 1]
dist.total_weight()    # 4
dist.weight_type       # IntWeight(bits=None, signed=True)
```

Two distributions compare equal when they have the same weight type and the
same weights.

## Updating weights

`update_weights` takes `(index, weight)` pairs sorted by index. It changes
those weights in place, and the number of weights stays the same.

```python
dist.update_weights([(0, 5), (2, 0)])
list(dist.weights())   # [5, 1, 0]
```

If an update is rejected, the distribution is left unchanged.

## Errors

Invalid input raises `weightpick.errors.WeightError`, which is a subclass of
`ValueError`. Its `kind` attribute is an `ErrorKind`:

| Kind | Raised when |
|------|-------------|
| `INVALID_INPUT` | the weights are empty, or update indices are out of order or out of range |
| `INVALID_WEIGHT` | a weight is negative or NaN |
| `INSUFFICIENT_NON_ZERO` | the weights sum to zero |
| `OVERFLOW` | a sum exceeds a bounded `IntWeight`, or `sample` is called on float weights whose total is infinite |

```python
from weightpick.errors import ErrorKind, WeightError

try:
    WeightedIndex([0, 0])
except WeightError as err:
    assert err.kind is ErrorKind.INSUFFICIENT_NON_ZERO
```

## Scope

This is a library only. It has no command-line tool. It provides no random
number generators of its own, and it has no way to save a distribution to
disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```