import pytest
from hypothesis import given
from hypothesis import strategies as st

from pformat.numbers import (
    atoi,
    atoull,
    itoa,
    itoa_base,
    map_zero,
    num_string_base,
    num_string_u_base,
    uitoa_base,
)

INT32 = st.integers(min_value=-(2**31) + 1, max_value=2**31 - 1)


@given(INT32)
def test_atoi_round_trips_str(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_none_and_empty():
    assert atoi(None) == 0
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoull_reads_digits():
    assert atoull("  123x") == 123
    assert atoull("18446744073709551615") == 2**64 - 1


def test_atoull_rejects_sign():
    assert atoull("-5") == 0


@given(INT32)
def test_itoa_matches_decimal(n):
    assert itoa(n) == str(n)


def test_itoa_minimum():
    assert itoa(-(2**31)) == "-2147483648"


@given(INT32, st.integers(min_value=2, max_value=16))
def test_itoa_base_is_magnitude(n, base):
    text = itoa_base(n, base)
    assert int(text, base) == abs(n)
    assert text == text.upper()


@given(INT32)
def test_itoa_base_ten_has_leading_zero(n):
    text = itoa_base(n, 10)
    assert text.startswith("0")
    assert int(text) == abs(n)


def test_itoa_base_minimum():
    assert itoa_base(-(2**31), 16) == "-2147483648"


@given(st.integers(min_value=-(2**40), max_value=2**40), st.integers(min_value=2, max_value=16))
def test_uitoa_base_wraps_to_32_bits(n, base):
    assert int(uitoa_base(n, base), base) == n & 0xFFFFFFFF


@given(st.integers(min_value=0, max_value=2**63 - 1), st.integers(min_value=2, max_value=16))
def test_num_string_base_round_trip(n, base):
    text = num_string_base(n, base)
    assert int(text, base) == n
    assert text == text.upper()


def test_num_string_base_negative_is_empty():
    assert num_string_base(-5, 10) == ""


def test_num_string_base_minimum():
    assert num_string_base(-(2**63), 10) == "9223372036854775808"


def test_zero_renders_as_single_digit():
    assert num_string_base(0, 16) == "0"
    assert num_string_u_base(0, 2) == "0"


@given(st.integers(min_value=-(2**64), max_value=2**65), st.integers(min_value=2, max_value=16))
def test_num_string_u_base_wraps_to_64_bits(n, base):
    assert int(num_string_u_base(n, base), base) == n % 2**64


@pytest.mark.parametrize("func", [itoa_base, uitoa_base, num_string_base, num_string_u_base])
@pytest.mark.parametrize("base", [0, 1, 17])
def test_bad_base_raises(func, base):
    with pytest.raises(ValueError):
        func(10, base)


def test_map_zero_clamps():
    assert map_zero(200.0, 100.0, 1.0, 2.0) == 2.0
    assert map_zero(-3.0, 100.0, 1.0, 2.0) == 1.0
    assert map_zero(0.0, 100.0, 1.0, 2.0) == 1.0


@given(st.floats(min_value=0.001, max_value=99.0))
def test_map_zero_stays_in_range(value):
    result = map_zero(value, 100.0, 10.0, 20.0)
    assert 10.0 <= result <= 20.0
    assert map_zero(value / 2, 100.0, 10.0, 20.0) <= result