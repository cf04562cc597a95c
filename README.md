# miniprintf

`miniprintf` is a small printf-style formatter. It handles a limited set of
conversions. `printf` writes the result to a stream and returns the number
of characters written. `format_string` returns the text instead.

## Installation

```
pip install miniprintf
```

## Supported conversions

| Directive | Argument                         | Output                                                   |
|-----------|----------------------------------|----------------------------------------------------------|
| `%c`      | a one-character `str`, or an int | the character; an int is cut down to its low byte        |
| `%s`      | a `str` or `None`                | the string, or `(null)` for `None`                       |
| `%d` `%i` | an int                           | decimal, wrapped into the signed 32-bit range            |
| `%u`      | an int                           | decimal, wrapped into the unsigned 32-bit range          |
| `%p`      | an int address or `None`         | `0x` and lower-case hex (taken modulo 2**64); `0x0` for `None` |
| `%x` `%X` | an int                           | hex in lower or upper case, wrapped to unsigned 32 bits  |
| `%%`      | none                             | a literal `%`                                            |

A `%` followed by a character that is not listed above uses up that
character, writes nothing and takes no argument. A `%` at the very end of
the format is written unchanged.

## Usage

Build a string:

```python
from miniprintf.printf import format_string

text = format_string("%s has %d items (0x%X)", "cart", 42, 42)
assert text == "cart has 42 items (0x2A)"
```

Write to a stream and get the character count:

```python
import io
from miniprintf.printf import printf

buffer = io.StringIO()
count = printf("%c%c%c %u%%\n", "a", "b", "c", 99, stream=buffer)
assert buffer.getvalue() == "abc 99%\n"
assert count == 8
```

If `stream` is left out, the output goes to standard output.

When a directive has no argument left, or its argument has the wrong type or
value (for example a `str` for `%d`, or a two-character string for `%c`),
`miniprintf.printf.FormatArgumentError` is raised. It is a subclass of
`TypeError`. Surplus arguments are ignored.

The individual conversions live in `miniprintf.conversions`:
`format_char`, `format_str`, `format_int`, `format_uint`, `format_percent`,
`format_pointer` and `format_hex`. Called directly, they raise `TypeError`
or `ValueError` for unsuitable arguments.

```python
from miniprintf.conversions import format_hex, format_int, format_pointer

format_int(-2147483648)        # "-2147483648"
format_int(2147483648)         # "-2147483648" (wrapped)
format_hex(255, upper=True)    # "FF"
format_pointer(0)              # "0x0"
format_pointer(None)           # "0x0"
```

## What it does not do

There are no flags, field widths, precision or length modifiers, and no
floating-point, octal or other conversions beyond those in the table. The
package has no command-line program. It is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```