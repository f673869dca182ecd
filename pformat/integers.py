"""Integer conversions: ``%d %i %u %U %o %O %x %X %b %B``."""

from __future__ import annotations

from operator import index

from .numbers import num_string_base, num_string_u_base, uitoa_base
from .spec import Conversion, Length, Spec

_BITS = {Length.H: 16, Length.HH: 8, Length.L: 64, Length.LL: 64, Length.Z: 64}
_WIDE = frozenset({Length.L, Length.LL, Length.Z})


def coerce(value: int, length: Length, signed: bool) -> int:
    """Reduce ``value`` to the C integer type its length modifier selects.

    ``hh`` is 8 bits, ``h`` 16, ``l``, ``ll`` and ``z`` 64, anything else
    32.  Raises TypeError for values that are not integers.
    """
    value = index(value)
    bits = _BITS.get(length, 32)
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _unsigned_digits(value: int, length: Length, base: int) -> str:
    num = coerce(value, length, False)
    if length in _WIDE:
        return num_string_u_base(num, base)
    return uitoa_base(num, base)


def _zeros(precision: int, size: int) -> str:
    return "0" * max(0, precision - size)


def _left(lead: str, digits: str, spec: Spec) -> str:
    return (lead + _zeros(spec.precision, len(digits)) + digits).ljust(spec.width)


def _pad_plain(
    out: str, spec: Spec, size: int, neg: int, space_check: bool
) -> str:
    """Width padding written before a number whose sign is handled apart."""
    width, precision, flags = spec.width, spec.precision, spec.flags
    pad = " "
    if size > precision or precision == -1:
        if width > size:
            if flags.zero and precision == -1:
                pad = "0"
            if not out:
                if space_check and flags.space and flags.zero:
                    out += " "
                out += pad * max(0, width - size - neg - len(out))
            else:
                out += pad * max(0, width - size - len(out))
    else:
        out += pad * max(0, width - precision - neg - len(out))
    return out


def _pad_prefixed(
    out: str, spec: Spec, size: int, digits: str, widen_zero: bool
) -> str:
    """Width padding written before a number that may carry a ``0x``/``0b`` prefix."""
    width, precision, flags = spec.width, spec.precision, spec.flags
    pad = " "
    if size > precision or precision == -1:
        if width > size:
            if flags.zero and precision == -1:
                pad = "0"
            if flags.space and flags.zero and not out:
                out += " "
            if flags.pound and not out and digits[:1] != "0":
                size += 2
            out += pad * max(0, width - size - len(out))
    else:
        if flags.pound and not out and digits == "":
            pass
        elif flags.pound and not out and (widen_zero or digits[:1] != "0"):
            precision += 2
        out += pad * max(0, width - precision - len(out))
    return out


def format_decimal(spec: Spec, value: int) -> str:
    """Format ``value`` as a signed decimal for ``%d`` and ``%i``."""
    num = coerce(value, spec.length, True)
    negative = num < 0
    digits = num_string_base(-num if negative else num, 10)
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    flags = spec.flags
    if flags.minus:
        if negative:
            lead = "-"
        elif flags.plus:
            lead = "+"
        elif flags.space:
            lead = " "
        else:
            lead = ""
        return _left(lead, digits, spec)

    size = len(digits)
    out = ""
    if negative:
        if flags.zero and spec.precision < 0 and spec.width > size:
            out += "-"
        out = _pad_plain(out, spec, size, 1, True)
        if not flags.zero or spec.precision > 0 or not out:
            out += "-"
    else:
        plus_first = (
            flags.plus and flags.zero and spec.precision < 0 and spec.width > size
        )
        if plus_first:
            out += "+"
        out = _pad_plain(out, spec, size, int(flags.plus), True)
        if flags.plus and not plus_first:
            out += "+"
        if not flags.plus and flags.space and not out:
            out += " "
    return out + _zeros(spec.precision, size) + digits


def format_unsigned(spec: Spec, value: int) -> str:
    """Format ``value`` as an unsigned decimal for ``%u`` and ``%U``."""
    length = Length.Z if spec.conversion is Conversion.LONG_UNSIGNED else spec.length
    digits = _unsigned_digits(value, length, 10)
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    if spec.flags.minus:
        return _left("", digits, spec)
    size = len(digits)
    out = _pad_plain("", spec, size, int(spec.flags.plus), False)
    return out + _zeros(spec.precision, size) + digits


def format_octal(spec: Spec, value: int) -> str:
    """Format ``value`` as unsigned octal for ``%o`` and ``%O``."""
    length = Length.Z if spec.conversion is Conversion.LONG_OCTAL else spec.length
    digits = _unsigned_digits(value, length, 8)
    flags = spec.flags
    if flags.pound and not digits.startswith("0"):
        digits = "0" + digits
    if digits.startswith("0") and spec.precision == 0 and not flags.pound:
        digits = ""
    if flags.minus:
        lead = "+" if flags.plus else " " if flags.space else ""
        return _left(lead, digits, spec)
    size = len(digits)
    out = _pad_plain("", spec, size, int(flags.plus), True)
    return out + _zeros(spec.precision, size) + digits


def _right_prefixed(
    spec: Spec, digits: str, prefix: str, show: bool, widen_zero: bool
) -> str:
    size = len(digits)
    flags = spec.flags
    out = ""
    if show:
        if flags.zero and spec.precision == -1:
            out += prefix
        out = _pad_prefixed(out, spec, size, digits, widen_zero)
        if not flags.zero or spec.precision > -1:
            out += prefix
    else:
        out = _pad_prefixed(out, spec, size, digits, widen_zero)
    return out + _zeros(spec.precision, size) + digits


def format_hex(spec: Spec, value: int, upper: bool) -> str:
    """Format ``value`` as unsigned hexadecimal for ``%x`` or, if ``upper``, ``%X``."""
    digits = _unsigned_digits(value, spec.length, 16)
    if not upper:
        digits = digits.lower()
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    prefix = "0X" if upper else "0x"
    show = spec.flags.pound and digits[:1] not in ("0", "")
    if spec.flags.minus:
        return _left(prefix if show else "", digits, spec)
    return _right_prefixed(spec, digits, prefix, show, False)


def format_binary(spec: Spec, value: int, upper: bool) -> str:
    """Format ``value`` as unsigned binary for ``%b`` or, if ``upper``, ``%B``."""
    digits = _unsigned_digits(value, spec.length, 2)
    if digits == "0" and spec.precision == 0:
        digits = ""
    prefix = "0B" if upper else "0b"
    show = spec.flags.pound and digits != ""
    if spec.flags.minus:
        return _left(prefix if show else "", digits, spec)
    return _right_prefixed(spec, digits, prefix, show, True)