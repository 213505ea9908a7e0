"""Identifier alphabet and random character selection."""

from __future__ import annotations

from short_ids.core.errors import InvalidArgumentError
from short_ids.core.random_source import RandomSource, SecretsRandomSource

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

_DEFAULT_SOURCE = SecretsRandomSource()


def pick_char(source: RandomSource | None = None) -> str:
    source = source or _DEFAULT_SOURCE
    return ALPHABET[source.randbelow(len(ALPHABET))]


def random_string(length: int, source: RandomSource | None = None) -> str:
    """Return ``length`` characters drawn independently from ALPHABET."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(
            f"length must be an integer, got {type(length).__name__}"
        )
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0, got {length}")
    source = source or _DEFAULT_SOURCE
    return "".join(pick_char(source) for _ in range(length))
