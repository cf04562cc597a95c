"""Rendering of single values for the printf-style conversions."""

from __future__ import annotations

_INT_BITS = 32
_UINT_MODULUS = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_POINTER_MODULUS = 1 << 64


def _require_int(value: object, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"{conversion} conversion needs an int, got {type(value).__name__}"
        )
    return value


def _to_int32(n: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (n - _INT_MIN) % _UINT_MODULUS + _INT_MIN


def _to_uint32(n: int) -> int:
    """Wrap an integer into the unsigned 32-bit range."""
    return n % _UINT_MODULUS


def format_char(c: int | str) -> str:
    """Render one character.

    An int is truncated to a single byte, as a char cast would; a str must
    hold exactly one character.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"character conversion needs one character, got {len(c)}")
        return c
    return chr(_require_int(c, "character") & 0xFF)


def format_str(s: str | None) -> str:
    """Render a string; ``None`` becomes ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"string conversion needs a str, got {type(s).__name__}")
    return s


def format_int(n: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(_require_int(n, "integer")))


def format_uint(n: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_to_uint32(_require_int(n, "unsigned")))


def format_percent() -> str:
    """Render a literal percent sign."""
    return "%"


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits.

    ``None`` (a null pointer) renders as ``0x0``.
    """
    if address is None:
        return "0x0"
    value = _require_int(address, "pointer") % _POINTER_MODULUS
    return f"0x{value:x}"


def format_hex(n: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    value = _to_uint32(_require_int(n, "hexadecimal"))
    return f"{value:X}" if upper else f"{value:x}"