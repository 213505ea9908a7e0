"""Base-36 encoding for timestamp and counter suffixes."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    """Encode a non-negative integer with lowercase base-36 digits."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    if value == 0:
        return "0"
    chars: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        chars.append(_DIGITS[remainder])
    return "".join(reversed(chars))
