import pytest
from hypothesis import given
from hypothesis import strategies as st

from pformat.printf import (
    format_char,
    format_float,
    format_percent,
    format_pointer,
    format_string,
    printf,
    render,
)
from pformat.spec import Conversion, Flags, Spec


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+5d", (3,)),
        ("% d", (3,)),
        ("%.3d", (5,)),
        ("%i and %i", (1, -1)),
        ("%u", (7,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%o", (8,)),
        ("%s", ("hello",)),
        ("%10.4s", ("abcdefg",)),
        ("%-8s|", ("ab",)),
        ("%.2s", ("xyz",)),
        ("%c", ("A",)),
        ("%5c", ("A",)),
        ("%-5c|", ("A",)),
        ("%%", ()),
        ("a%sb%dc", ("mid", 9)),
    ],
)
def test_render_matches_standard_formatting(fmt, args):
    assert render(fmt, *args) == fmt % args


@given(st.text().filter(lambda t: "%" not in t))
def test_plain_text_passes_through(text):
    assert render(text) == text


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trip(n):
    assert int(render("%d", n)) == n


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_round_trip(n):
    assert int(render("%x", n), 16) == n


@given(st.text())
def test_string_argument_unchanged(text):
    assert render("%s", text) == text


def test_trailing_percent_is_dropped():
    assert render("abc%") == "abc"


def test_unknown_specifier_prints_itself():
    assert render("%k") == "k"
    assert render("%5k") == "k"


def test_float_writes_nothing_and_takes_no_argument():
    assert render("%f%d", 7) == "7"
    assert format_float(Spec(conversion=Conversion.FLOAT)) == ""


def test_stray_dot_counts_but_writes_nothing(capsys):
    assert printf("%..") == 42
    assert capsys.readouterr().out == ""


def test_printf_writes_render_output(capsys):
    count = printf("%d-%s|%5x", 5, "x", 255)
    out = capsys.readouterr().out
    assert out == render("%d-%s|%5x", 5, "x", 255)
    assert count == len(out)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_null_string():
    assert format_string(Spec(), None) == "(null)"
    assert render("%.3s", None) == "(nu"


def test_string_rejects_non_text():
    with pytest.raises(TypeError):
        format_string(Spec(), 5)


def test_empty_string_left_flag_pads_on_left():
    spec = Spec(flags=Flags(minus=True, zero=True), width=3)
    assert format_string(spec, "") == "000"


def test_char_from_integer_and_width():
    assert format_char(Spec(), 65) == "A"
    result = format_char(Spec(width=4, flags=Flags(zero=True)), "Z")
    assert len(result) == 4
    assert result.endswith("Z")
    assert set(result[:-1]) == {"0"}


def test_char_rejects_long_text():
    with pytest.raises(TypeError):
        format_char(Spec(), "ab")


def test_percent_padding():
    result = format_percent(Spec(width=3, flags=Flags(zero=True)))
    assert len(result) == 3
    assert result.endswith("%")
    assert set(result[:-1]) == {"0"}
    assert format_percent(Spec(width=3, flags=Flags(minus=True))) == "%".ljust(3)


def test_null_pointer():
    assert format_pointer(Spec(), 0) == "0x0"
    assert render("%p", None) == "0x0"
    assert render("%.0p", 0) == "0x"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(address):
    text = format_pointer(Spec(), address)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text, 16) == address


@given(st.integers(min_value=1, max_value=2**48), st.integers(min_value=0, max_value=30))
def test_pointer_left_justified_width(address, width):
    text = format_pointer(Spec(flags=Flags(minus=True), width=width), address)
    assert len(text) == max(width, len(text.rstrip()))
    assert int(text.rstrip(), 16) == address