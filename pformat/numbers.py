"""Integer parsing and base conversion helpers with C integer semantics."""

from __future__ import annotations

from itertools import takewhile

_DIGITS = "0123456789ABCDEF"
_WHITESPACE = " \t\r\f\n\v"

INT_MIN = -(1 << 31)
LLONG_MIN = -(1 << 63)


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _check_base(base: int) -> None:
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, not {base}")


def _digits(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` with upper-case digits."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, remainder = divmod(value, base)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def _leading_decimal(text: str) -> str:
    return "".join(takewhile(lambda c: "0" <= c <= "9", text))


def atoi(text: str | None) -> int:
    """Parse a leading signed decimal integer, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit.  ``None`` and text without
    digits give 0.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _leading_decimal(rest)
    value = int(digits) if digits else 0
    return _wrap_signed(sign * value, 32)


def atoull(text: str | None) -> int:
    """Parse leading decimal digits as an unsigned 64-bit integer.

    No sign is accepted: text starting with a sign gives 0.
    """
    if text is None:
        return 0
    digits = _leading_decimal(text.lstrip(_WHITESPACE))
    return (int(digits) if digits else 0) % (1 << 64)


def itoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_wrap_signed(n, 32))


def itoa_base(n: int, base: int) -> str:
    """Digits of ``|n|`` in ``base`` for a 32-bit signed ``n``.

    The sign is dropped, and in base 10 the digits carry one leading
    ``0``.  The most negative 32-bit value always gives its decimal text.
    """
    _check_base(base)
    n = _wrap_signed(n, 32)
    if n == INT_MIN:
        return "-2147483648"
    text = _digits(abs(n), base)
    if base == 10:
        text = "0" + text
    return text


def uitoa_base(n: int, base: int) -> str:
    """Digits of ``n`` taken as a 32-bit unsigned integer."""
    _check_base(base)
    return _digits(n & 0xFFFFFFFF, base)


def num_string_base(num: int, base: int) -> str:
    """Digits of a non-negative 64-bit signed integer.

    Negative values give an empty string, except the most negative one,
    which gives the decimal text of its magnitude.
    """
    _check_base(base)
    num = _wrap_signed(num, 64)
    if num == LLONG_MIN:
        return "9223372036854775808"
    if num < 0:
        return ""
    return _digits(num, base)


def num_string_u_base(num: int, base: int) -> str:
    """Digits of ``num`` taken as a 64-bit unsigned integer."""
    _check_base(base)
    return _digits(num % (1 << 64), base)


def map_zero(value: float, maximum: float, start: float, end: float) -> float:
    """Map ``value`` from ``[0, maximum]`` linearly onto ``[start, end]``, clamped."""
    if value >= maximum:
        return end
    if value <= 0:
        return start
    return value * ((end - start) / maximum) + start