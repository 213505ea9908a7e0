"""Core primitives: alphabet, random source, clock, counter, encoding, errors."""

from short_ids.core.alphabet import ALPHABET, pick_char, random_string
from short_ids.core.clock import Clock, SystemClock
from short_ids.core.counter import ProcessCounter
from short_ids.core.random_source import RandomSource, SecretsRandomSource

__all__ = [
    "ALPHABET",
    "pick_char",
    "random_string",
    "Clock",
    "SystemClock",
    "ProcessCounter",
    "RandomSource",
    "SecretsRandomSource",
]
