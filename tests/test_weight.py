import math

import pytest

from weightpick.errors import ErrorKind, WeightError
from weightpick.weight import (
    F32,
    F64,
    I8,
    I32,
    U8,
    U32,
    USIZE,
    FloatWeight,
    IntWeight,
    weight_type_for,
)


@pytest.mark.parametrize("wtype", [I8, I32, U8, U32, USIZE])
def test_add_up_to_max_is_fine(wtype):
    assert wtype.checked_add(wtype.max_value, 0) == wtype.max_value
    assert wtype.checked_add(wtype.max_value - 1, 1) == wtype.max_value


@pytest.mark.parametrize("wtype", [I8, I32, U8, U32, USIZE])
def test_add_past_max_overflows(wtype):
    with pytest.raises(WeightError) as info:
        wtype.checked_add(wtype.max_value, 1)
    assert info.value.kind == ErrorKind.OVERFLOW


@pytest.mark.parametrize("wtype", [I8, I32])
def test_signed_add_below_min_overflows(wtype):
    assert wtype.checked_add(wtype.min_value + 1, -1) == wtype.min_value
    with pytest.raises(WeightError) as info:
        wtype.checked_add(wtype.min_value, -1)
    assert info.value.kind == ErrorKind.OVERFLOW


def test_unsigned_range_starts_at_zero():
    assert U8.checked_add(U8.min_value, U8.zero) == 0
    assert U8.checked_add(U8.max_value, 0) == 2**8 - 1
    with pytest.raises(WeightError) as info:
        U8.checked_add(0, 2**8)
    assert info.value.kind == ErrorKind.OVERFLOW


def test_signed_range_is_symmetric_around_minus_one():
    assert I8.checked_add(I8.min_value, I8.max_value) == -1
    assert I8.checked_add(-128, 127) == -1


def test_usize_overflow_on_large_sum():
    with pytest.raises(WeightError) as info:
        USIZE.checked_add(2, USIZE.max_value)
    assert info.value.kind == ErrorKind.OVERFLOW


def test_unbounded_int_never_overflows():
    wtype = IntWeight()
    big = 2**200
    assert wtype.checked_add(big, big) == 2 * big
    assert wtype.min_value is None and wtype.max_value is None


def test_int_zero_is_additive_identity():
    assert I32.checked_add(I32.zero, 7) == 7


def test_invalid_bit_width_rejected():
    with pytest.raises(ValueError):
        IntWeight(0)
    with pytest.raises(ValueError):
        FloatWeight(16)


def test_float_add_double():
    assert F64.checked_add(0.5, 0.25) == 0.5 + 0.25
    assert F64.zero == 0.0


def test_float_overflow_gives_infinity():
    assert F64.checked_add(1e308, 1e308) == math.inf
    assert F32.checked_add(3e38, 3e38) == math.inf


def test_float32_loses_small_increment():
    assert F32.checked_add(1.0, 2.0**-30) == 1.0
    assert F64.checked_add(1.0, 2.0**-30) > 1.0


def test_float32_result_is_stable_under_rounding():
    once = F32.checked_add(0.1, 0.2)
    assert F32.checked_add(once, 0.0) == once


def test_float_nan_propagates():
    assert math.isnan(F32.checked_add(math.nan, 1.0))


def test_weight_type_for_ints():
    assert weight_type_for([1, 2, 3]) == IntWeight()


def test_weight_type_for_floats():
    assert weight_type_for([1, 2.5]) == FloatWeight()


def test_weight_type_for_empty_is_int():
    assert weight_type_for([]) == IntWeight()


def test_weight_type_for_rejects_non_numbers():
    with pytest.raises(TypeError):
        weight_type_for([1, "2"])