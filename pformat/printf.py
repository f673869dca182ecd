"""The printf entry points and the character, string, pointer and percent conversions."""

from __future__ import annotations

import sys
from operator import index
from typing import Any, Iterator

from .integers import (
    format_binary,
    format_decimal,
    format_hex,
    format_octal,
    format_unsigned,
)
from .numbers import num_string_u_base
from .spec import Conversion, Spec, parse_spec

_MISSING = object()
# Count a stray '.' conversion adds to the total although it writes nothing.
_DOT_COUNT = 42
_FLOAT_CONVERSIONS = frozenset({Conversion.FLOAT, Conversion.FLOAT_UPPER})


def format_char(spec: Spec, value: int | str) -> str:
    """Format one character for ``%c``; integers are taken as unsigned char."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires an integer or a single character")
        char = value
    else:
        char = chr(index(value) & 0xFF)
    if spec.flags.minus:
        return char.ljust(spec.width)
    if spec.width > 1:
        pad = "0" if spec.flags.zero else " "
        return pad * (spec.width - 1) + char
    return char


def format_string(spec: Spec, value: str | None) -> str:
    """Format text for ``%s``; None is shown as ``(null)``."""
    if value is None:
        value = "(null)"
    elif not isinstance(value, str):
        raise TypeError("%s requires a string or None")
    if 0 <= spec.precision < len(value):
        value = value[: spec.precision]
    size = len(value)
    if size and spec.flags.minus:
        return value if spec.width <= size else value.ljust(spec.width)
    if spec.width > size:
        pad = "0" if spec.flags.zero else " "
        return pad * (spec.width - size) + value
    return value


def _pad_pointer(out: str, spec: Spec, size: int) -> str:
    width, precision = spec.width, spec.precision
    neg = int(spec.flags.plus)
    if size > precision or precision == -1:
        if width > size:
            pad = "0" if spec.flags.zero and precision == -1 else " "
            target = width - size - (neg if not out else 0)
            out += pad * max(0, target - len(out))
    else:
        out += " " * max(0, width - precision - neg - len(out))
    return out


def format_pointer(spec: Spec, value: int | None) -> str:
    """Format an address for ``%p`` as lower-case hexadecimal with ``0x``."""
    address = 0 if value is None else index(value) % (1 << 64)
    if address:
        text = "0x" + num_string_u_base(address, 16).lower()
    else:
        text = "0x0"
    precision = spec.precision
    size = len(text)

    if spec.flags.minus:
        zeros = "0" * max(0, precision - size)
        return (zeros + text).ljust(spec.width)

    split_prefix = (
        (spec.flags.zero and spec.width > 14)
        or precision > size
        or (precision > 0 and text[2:3] == "0")
    )
    if split_prefix:
        out = "0x"
        text = text[2:]
        size -= 2
        out = _pad_pointer(out, spec, size)
        if precision > size - 2:
            out += "0" * max(0, precision - size)
            precision = min(precision, size) - 1
    else:
        out = _pad_pointer("", spec, size)
        if precision > size:
            out += "0" * (precision - size)
            precision = size - 1
    if precision == 0 and text[2:3] == "0":
        return out + text[: size - 1]
    return out + text


def format_percent(spec: Spec) -> str:
    """Format a literal ``%`` for ``%%``."""
    if spec.flags.minus:
        return "%".ljust(spec.width)
    if spec.width > 1:
        pad = "0" if spec.flags.zero else " "
        return pad * (spec.width - 1) + "%"
    return "%"


def format_float(spec: Spec) -> str:
    """Format a floating conversion.

    Floating conversions are disabled: they write nothing and take no
    argument. A spec for any other conversion is rejected.
    """
    if spec.conversion not in _FLOAT_CONVERSIONS:
        raise ValueError(f"not a floating conversion: {spec.conversion!r}")
    return ""


def _next_arg(args: Iterator) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _convert(spec: Spec, args: Iterator) -> tuple[str, int]:
    conversion = spec.conversion
    if conversion is Conversion.DOT:
        return "", _DOT_COUNT
    if conversion in _FLOAT_CONVERSIONS:
        return format_float(spec), 0
    if conversion is Conversion.PERCENT:
        text = format_percent(spec)
    elif conversion in (Conversion.DECIMAL, Conversion.INTEGER):
        text = format_decimal(spec, _next_arg(args))
    elif conversion is Conversion.CHAR:
        text = format_char(spec, _next_arg(args))
    elif conversion is Conversion.STRING:
        text = format_string(spec, _next_arg(args))
    elif conversion is Conversion.POINTER:
        text = format_pointer(spec, _next_arg(args))
    elif conversion in (Conversion.OCTAL, Conversion.LONG_OCTAL):
        text = format_octal(spec, _next_arg(args))
    elif conversion in (Conversion.UNSIGNED, Conversion.LONG_UNSIGNED):
        text = format_unsigned(spec, _next_arg(args))
    elif conversion in (Conversion.HEX, Conversion.HEX_UPPER):
        text = format_hex(spec, _next_arg(args), conversion is Conversion.HEX_UPPER)
    elif conversion in (Conversion.BINARY, Conversion.BINARY_UPPER):
        text = format_binary(
            spec, _next_arg(args), conversion is Conversion.BINARY_UPPER
        )
    else:
        return "", _DOT_COUNT
    return text, len(text)


def _format(fmt: str, args: tuple) -> tuple[str, int]:
    """Produce the formatted text and the count printf reports for it."""
    it = iter(args)
    parts: list[str] = []
    count = 0
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent == -1:
            percent = end
        if percent > pos:
            parts.append(fmt[pos:percent])
            count += percent - pos
            pos = percent
            continue
        spec, pos = parse_spec(fmt, pos + 1, it)
        if spec.conversion is None:
            if pos < end:
                parts.append(fmt[pos])
                count += 1
                pos += 1
            continue
        pos += 1
        text, written = _convert(spec, it)
        parts.append(text)
        count += written
    return "".join(parts), max(0, count)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by formatted ``args``."""
    return _format(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the reported count."""
    text, count = _format(fmt, args)
    sys.stdout.write(text)
    return count