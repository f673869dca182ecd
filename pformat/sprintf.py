"""Formatting into a page-sized text buffer with ``sprintf``.

Conversions write into a shared page of character cells at the current
position and report how far the position advances.  Several of them
measure that advance by scanning for the first unwritten or cleared
cell, as the output routines have always done.  The text a conversion
finally contributes can therefore differ from what ``printf`` shows for
the same specification.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterator

from .integers import coerce
from .numbers import num_string_base, num_string_u_base, uitoa_base
from .printf import format_char, format_string
from .spec import Conversion, Length, Spec, parse_spec

PAGESIZE = 4096

_NUL = "\0"
_MISSING = object()
_WIDE = frozenset({Length.L, Length.LL, Length.Z})


class _Page:
    """Character cells written at any offset; unwritten cells read as NUL."""

    def __init__(self) -> None:
        self._cells: list[str] = []

    def put(self, at: int, text: str) -> None:
        """Write ``text`` at ``at`` without a terminator."""
        end = at + len(text)
        if end > len(self._cells):
            self._cells.extend(_NUL * (end - len(self._cells)))
        self._cells[at:end] = text

    def put_terminated(self, at: int, text: str) -> None:
        """Write ``text`` at ``at`` followed by a NUL cell."""
        self.put(at, text + _NUL)

    def strlen(self, at: int) -> int:
        """Number of cells from ``at`` up to the first NUL."""
        try:
            return self._cells.index(_NUL, at) - at
        except ValueError:
            return max(0, len(self._cells) - at)

    def text(self, end: int) -> str:
        """The first ``end`` cells as a string."""
        cells = self._cells[:end]
        return "".join(cells) + _NUL * (end - len(cells))


def _next_arg(args: Iterator) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _padding(
    page: _Page, at: int, size: int, spec: Spec, neg: int, count: int
) -> int:
    """Write width padding at ``at``; return the count including what came before."""
    width, precision, flags = spec.width, spec.precision, spec.flags
    start = count
    pad = " "
    if size > precision or precision == -1:
        if width > size:
            if flags.zero and precision == -1:
                pad = "0"
            if not count:
                if flags.space and flags.zero:
                    count += 1
                count = max(count, width - size - neg)
            else:
                count = max(count, width - size)
    else:
        count = max(count, width - precision - neg)
    page.put(at, pad * (count - start))
    return count


def _append_number(page: _Page, at: int, digits: str, spec: Spec) -> None:
    """Write precision zeros from ``at``, then the digits after the text found there."""
    zeros = max(0, spec.precision - len(digits))
    if zeros:
        page.put_terminated(at, "0" * zeros)
    tail = at + zeros
    page.put(tail + page.strlen(tail), digits)


def _plain_lead(
    page: _Page, at: int, size: int, spec: Spec, space_needs_no_plus: bool
) -> None:
    flags = spec.flags
    count = _padding(page, at, size, spec, int(flags.plus), 0)
    if flags.space and not count and not (space_needs_no_plus and flags.plus):
        page.put_terminated(at, " ")


def _negative_lead(page: _Page, at: int, size: int, spec: Spec) -> None:
    flags = spec.flags
    pos = at
    count = 0
    if flags.zero and spec.precision < 0 and spec.width > size:
        page.put_terminated(at, "-")
        pos += 1
        count = 1
    count = _padding(page, pos, size, spec, 1, count)
    if not flags.zero or spec.precision > 0 or not count:
        page.put_terminated(pos, "-")


def _positive_lead(page: _Page, at: int, size: int, spec: Spec) -> None:
    flags = spec.flags
    pos = at
    count = 0
    plus_first = (
        flags.plus and flags.zero and spec.precision < 0 and spec.width > size
    )
    if plus_first:
        page.put_terminated(at, "+")
        pos += 1
        count = 1
    count = _padding(page, pos, size, spec, int(flags.plus), count)
    if flags.plus and not plus_first:
        page.put_terminated(pos, "+")
        count += 1
    if not flags.plus and flags.space and not count:
        page.put_terminated(pos, " ")


def _left_number(page: _Page, at: int, zeros: int, body: str, pad: int) -> None:
    """Write zeros, then ``body`` and ``pad`` spaces, from ``at``."""
    if zeros:
        page.put_terminated(at, "0" * zeros)
    page.put(at + zeros, body + " " * max(0, pad))


def _decimal(page: _Page, at: int, spec: Spec, value: Any) -> int:
    num = coerce(value, spec.length, True)
    negative = num < 0
    digits = num_string_base(-num if negative else num, 10)
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    size = len(digits)
    flags = spec.flags
    if flags.minus:
        # The sign cell is always skipped, even when no sign is written,
        # and the trailing padding does not count it.
        if size and negative:
            page.put_terminated(at, "-")
        elif not negative:
            if flags.plus:
                page.put_terminated(at, "+")
            elif flags.space:
                page.put_terminated(at, "-")
        zeros = max(0, spec.precision - size)
        _left_number(page, at + 1, zeros, digits, spec.width - size)
    else:
        if negative:
            _negative_lead(page, at, size, spec)
        else:
            _positive_lead(page, at, size, spec)
        _append_number(page, at, digits, spec)
    return page.strlen(at)


def _unsigned(page: _Page, at: int, spec: Spec, value: Any) -> int:
    length = Length.Z if spec.conversion is Conversion.LONG_UNSIGNED else spec.length
    digits = num_string_u_base(coerce(value, length, False), 10)
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    size = len(digits)
    if spec.flags.minus:
        zeros = max(0, spec.precision - size)
        _left_number(page, at, zeros, digits, spec.width - size)
    else:
        _plain_lead(page, at, size, spec, False)
        _append_number(page, at, digits, spec)
    return page.strlen(at)


def _hex(page: _Page, at: int, spec: Spec, value: Any, *, upper: bool) -> int:
    num = coerce(value, spec.length, True)
    if spec.length in _WIDE:
        digits = num_string_u_base(num, 16)
    else:
        digits = uitoa_base(num, 16)
    if not upper:
        digits = digits.lower()
    if digits.startswith("0") and spec.precision == 0:
        digits = ""
    size = len(digits)
    flags = spec.flags
    prefix = "0X" if upper else "0x"
    show = flags.pound and digits[:1] not in ("0", "")

    if flags.minus:
        lead = prefix if show else ""
        pos = at
        if lead:
            page.put_terminated(at, lead)
            pos += len(lead)
        zeros = max(0, spec.precision - size)
        written = len(lead) + zeros + size
        _left_number(page, pos, zeros, digits, spec.width - written)
        return page.strlen(at)

    if show:
        if flags.zero and spec.precision == -1:
            page.put_terminated(at, prefix)
        _plain_lead(page, at + page.strlen(at), size, spec, True)
        if not flags.zero or spec.precision > -1:
            page.put_terminated(at, prefix)
    else:
        _plain_lead(page, at + page.strlen(at), size, spec, True)
    if spec.precision > size:
        page.put_terminated(at + page.strlen(at), "0" * (spec.precision - size))
    page.put(at + page.strlen(at), digits)
    return page.strlen(at)


def _char(page: _Page, at: int, spec: Spec, value: Any) -> int:
    text = format_char(spec, value)
    page.put(at, text)
    return len(text)


def _string(page: _Page, at: int, spec: Spec, value: Any) -> int:
    text = format_string(spec, value)
    source = "(null)" if value is None else value
    size = len(source) if spec.precision < 0 else min(spec.precision, len(source))
    if spec.width <= size:
        page.put_terminated(at, text)
    else:
        page.put(at, text)
    return len(text)


_Writer = Callable[[_Page, int, Spec, Any], int]

_WRITERS: dict[Conversion, _Writer] = {
    Conversion.DECIMAL: _decimal,
    Conversion.INTEGER: _decimal,
    Conversion.CHAR: _char,
    Conversion.STRING: _string,
    Conversion.UNSIGNED: _unsigned,
    Conversion.LONG_UNSIGNED: _unsigned,
    Conversion.HEX: partial(_hex, upper=False),
    Conversion.HEX_UPPER: partial(_hex, upper=True),
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` by ``fmt`` into a page and return the text written.

    Supports ``%d %i %c %s %u %U %x %X``; other conversions raise
    ValueError.  An unrecognised specifier character is written as the
    character after it in code order.  Formatting stops once the text
    reaches PAGESIZE characters, although a conversion may run past it.
    Raises TypeError when arguments run out or have the wrong type.
    """
    it = iter(args)
    page = _Page()
    cursor = 0
    pos = 0
    end = len(fmt)
    while pos < end and cursor < PAGESIZE:
        if fmt[pos] != "%":
            stop = fmt.find("%", pos)
            if stop == -1:
                stop = end
            chunk = fmt[pos:stop][: PAGESIZE - cursor]
            page.put(cursor, chunk)
            cursor += len(chunk)
            pos += len(chunk)
            continue
        spec, pos = parse_spec(fmt, pos + 1, it)
        if spec.conversion is None:
            if pos >= end:
                break
            page.put(cursor, chr(ord(fmt[pos]) + 1))
            cursor += 1
            pos += 1
            continue
        writer = _WRITERS.get(spec.conversion)
        if writer is None:
            raise ValueError(f"unsupported conversion '%{fmt[pos]}'")
        pos += 1
        cursor += writer(page, cursor, spec, _next_arg(it))
    return page.text(cursor)