# pformat

A printf-style formatting library. It parses conversion specifications
(flags, width, precision, length modifiers) and renders integers, strings,
characters, pointers and percent signs by a fixed set of padding rules,
reducing integer arguments to the C integer type their length modifier
selects.

## Usage

```python
from pformat.printf import render, printf
from pformat.sprintf import sprintf

render("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
printf("%08.3d\n", 7)                    # writes to stdout, returns the reported count
sprintf("%+d %u", 5, 10)                 # '+5 10'
```

### `pformat.printf`

- `render(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes that text to standard output and returns a
  count, never below zero.

Conversions:

| Character | Meaning                                        |
|-----------|------------------------------------------------|
| `%`       | a literal percent sign                         |
| `d` `i`   | signed decimal                                 |
| `c`       | one character (an integer or a 1-char string)  |
| `s`       | a string (`None` prints `(null)`)              |
| `p`       | an address in lower-case hex with `0x`         |
| `o` `O`   | unsigned octal (`O` is always 64-bit)          |
| `u` `U`   | unsigned decimal (`U` is always 64-bit)        |
| `x` `X`   | unsigned hexadecimal                           |
| `b` `B`   | unsigned binary                                |
| `f` `F`   | accepted; writes nothing and takes no argument |

A `%` followed by a character that is not a conversion writes that
character. A stray `.` conversion writes nothing but adds 42 to the count
`printf` returns.

Flags are `-`, `+`, space, `#` and `0`. Width and precision may be numbers
or `*`, which takes the value from the argument list; a negative `*` width
turns on left alignment, a negative precision means none. Length modifiers
`hh`, `h`, `l`, `ll`, `L`, `z` and `j` select how an integer argument is
narrowed (8, 16, 64, 64, 32, 64 and 64 bits; 32 otherwise).

Too few arguments raise `TypeError`.

### `pformat.sprintf`

`sprintf(fmt, *args)` builds the text in a page of `PAGESIZE` (4096)
characters and returns what was written. It supports only `d i c s u U x X`;
any other conversion, `%%` included, raises `ValueError`. An unrecognised
specifier character is written as the character that follows it in code
order. Several of its conversions lay out signs, padding and prefixes
differently from `render`, so the two can give different text for the same
specification.

### Lower-level modules

- `pformat.spec`: `parse_spec`, `Spec`, `Flags`, `Length`, `Conversion`,
  `is_flag`, `conversion_for`.
- `pformat.integers`: `coerce`, `format_decimal`, `format_unsigned`,
  `format_octal`, `format_hex`, `format_binary`.
- `pformat.printf`: `format_char`, `format_string`, `format_pointer`,
  `format_percent`, `format_float`.
- `pformat.numbers`: `atoi`, `atoull`, `itoa`, `itoa_base`, `uitoa_base`,
  `num_string_base`, `num_string_u_base`, `map_zero`.

## Limitations

- Floating-point conversions produce no output; there is no float formatting.
- Text produced by `sprintf` is not guaranteed to match `render`.
- There is no command-line interface; the package is a library only.

## Tests

The test suite uses pytest and hypothesis, available through the `test`
extra.