"""Utility functions."""

from .numbers import clamp, format_number, parse_float, parse_int, round_half_up

__all__ = [
    "clamp",
    "format_number",
    "parse_float",
    "parse_int",
    "round_half_up",
]
