"""A small printf-style formatter: value conversions and the printf functions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]