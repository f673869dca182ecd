"""Parsing of printf-style conversion specifications."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Iterator

from .numbers import atoi

_FLAG_CHARS = " #+-0"
_MISSING = object()


class Length(Enum):
    """Length modifier of a conversion."""

    NONE = ""
    H = "h"
    HH = "hh"
    L = "l"
    LL = "ll"
    LONG_DOUBLE = "L"
    Z = "z"


class Conversion(IntEnum):
    """Conversion kind, numbered by its specifier's dispatch code."""

    PERCENT = 1
    DECIMAL = 2
    CHAR = 3
    STRING = 4
    POINTER = 5
    OCTAL = 6
    UNSIGNED = 7
    HEX = 8
    FLOAT = 9
    BINARY = 10
    INTEGER = 12
    DOT = 15
    LONG_OCTAL = 16
    LONG_UNSIGNED = 17
    HEX_UPPER = 18
    FLOAT_UPPER = 19
    BINARY_UPPER = 20


_CONVERSIONS = {
    "%": Conversion.PERCENT,
    "d": Conversion.DECIMAL,
    "c": Conversion.CHAR,
    "s": Conversion.STRING,
    "p": Conversion.POINTER,
    "o": Conversion.OCTAL,
    "u": Conversion.UNSIGNED,
    "x": Conversion.HEX,
    "f": Conversion.FLOAT,
    "b": Conversion.BINARY,
    "i": Conversion.INTEGER,
    ".": Conversion.DOT,
    "O": Conversion.LONG_OCTAL,
    "U": Conversion.LONG_UNSIGNED,
    "X": Conversion.HEX_UPPER,
    "F": Conversion.FLOAT_UPPER,
    "B": Conversion.BINARY_UPPER,
}


@dataclass(frozen=True)
class Flags:
    """Flag characters given in a specification."""

    space: bool = False
    pound: bool = False
    plus: bool = False
    minus: bool = False
    zero: bool = False


@dataclass(frozen=True)
class Spec:
    """A parsed conversion specification; precision -1 means none given."""

    flags: Flags = field(default_factory=Flags)
    width: int = 0
    precision: int = -1
    length: Length = Length.NONE
    conversion: Conversion | None = None


def is_flag(char: str) -> bool:
    """Whether ``char`` is one of the flag characters ``' #+-0'``."""
    return len(char) == 1 and char in _FLAG_CHARS


def conversion_for(char: str) -> Conversion | None:
    """The conversion a specifier character selects, or None."""
    return _CONVERSIONS.get(char)


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_int(args: Iterator) -> int:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return _int32(int(value))


def _at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _skip_digits(fmt: str, pos: int) -> int:
    while "0" <= _at(fmt, pos) <= "9" and _at(fmt, pos):
        pos += 1
    return pos


def _parse_flags(fmt: str, pos: int) -> tuple[Flags, int]:
    seen = set()
    while is_flag(_at(fmt, pos)):
        seen.add(fmt[pos])
        pos += 1
    flags = Flags(
        space=" " in seen,
        pound="#" in seen,
        plus="+" in seen,
        minus="-" in seen,
        zero="0" in seen,
    )
    return flags, pos


def _parse_width(fmt: str, pos: int, args: Iterator) -> tuple[int, int]:
    width = 0
    if _at(fmt, pos) == "*":
        width = _next_int(args)
        pos += 1
    if _at(fmt, pos).isascii() and _at(fmt, pos).isdigit():
        width = atoi(fmt[pos:])
        pos = _skip_digits(fmt, pos)
    if _at(fmt, pos) == "*":
        width = _next_int(args)
        pos += 1
    return width, pos


def _parse_precision(fmt: str, pos: int, args: Iterator) -> tuple[int, int]:
    if _at(fmt, pos) != ".":
        return -1, pos
    pos += 1
    precision = 0
    char = _at(fmt, pos)
    if char.isascii() and char.isdigit():
        precision = atoi(fmt[pos:])
        pos = _skip_digits(fmt, pos)
    elif char == "*":
        precision = _next_int(args)
        pos += 1
    if precision < 0:
        precision = -1
    return precision, pos


def _parse_length(fmt: str, pos: int) -> tuple[Length, int]:
    char, following = _at(fmt, pos), _at(fmt, pos + 1)
    if char == "L":
        length, step = Length.LONG_DOUBLE, 1
    elif char == "h":
        length, step = (Length.HH, 2) if following == "h" else (Length.H, 1)
    elif char == "l":
        length, step = (Length.LL, 2) if following == "l" else (Length.L, 1)
    elif char in {"z", "j"}:
        length, step = Length.Z, 1
    else:
        return Length.NONE, pos
    pos += step
    while _at(fmt, pos) in {"z", "j", "h", "l"}:
        pos += 1
    return length, pos


def parse_spec(fmt: str, pos: int, args: Iterator) -> tuple[Spec, int]:
    """Parse the specification starting at ``pos``, just after a ``%``.

    ``args`` is an iterator from which ``*`` width and precision values
    are taken.  Returns the spec and the index of the character that
    ended it: the conversion character, an unrecognised character, or
    ``len(fmt)``.  Raises TypeError when ``args`` runs out.
    """
    if pos >= len(fmt):
        return Spec(), pos
    flags, pos = _parse_flags(fmt, pos)
    width, pos = _parse_width(fmt, pos, args)
    if width < 0:
        width = _int32(-width)
        flags = replace(flags, minus=True)
    precision, pos = _parse_precision(fmt, pos, args)
    length, pos = _parse_length(fmt, pos)
    conversion = conversion_for(_at(fmt, pos))
    return Spec(flags, width, precision, length, conversion), pos