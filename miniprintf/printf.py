"""A small printf supporting the c, s, d, i, u, p, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_percent,
    format_pointer,
    format_str,
    format_uint,
)


class FormatArgumentError(TypeError):
    """A conversion had no argument left, or one of the wrong kind."""


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "p": format_pointer,
    "x": lambda n: format_hex(n, upper=False),
    "X": lambda n: format_hex(n, upper=True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing percent sign is printed as it stands.
            yield ch
            return
        if spec == "%":
            yield format_percent()
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions consume the character and print nothing.
            continue
        try:
            arg = next(arguments)
        except StopIteration:
            raise FormatArgumentError(f"no argument left for %{spec}") from None
        try:
            yield convert(arg)
        except (TypeError, ValueError) as exc:
            raise FormatArgumentError(f"bad argument for %{spec}: {exc}") from exc


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered arguments."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)