"""Uniform random integer sources."""

from __future__ import annotations

import secrets
from typing import Protocol

from short_ids.core.errors import RandomSourceUnavailableError


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int: ...


class SecretsRandomSource:
    """Default implementation: the OS CSPRNG via ``secrets``.

    ``secrets.randbelow`` draws by rejection sampling, so every value in
    ``[0, upper)`` is equally likely.
    """

    def randbelow(self, upper: int) -> int:
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceUnavailableError(
                "secure random source is unavailable"
            ) from exc
