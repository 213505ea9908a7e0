"""Identifier generator: random IDs with an optional time+counter suffix."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from short_ids.config import DEFAULT_SIZE, GenerateOptions, GeneratorConfig
from short_ids.core.alphabet import random_string
from short_ids.core.base36 import to_base36
from short_ids.core.clock import Clock, SystemClock
from short_ids.core.counter import ProcessCounter
from short_ids.core.errors import InvalidArgumentError
from short_ids.core.random_source import RandomSource, SecretsRandomSource

logger = logging.getLogger(__name__)

# Marks an omitted size; the configured default_size is used instead.
_CONFIGURED_SIZE: Any = object()


class IdGenerator(Protocol):
    def generate(self, size: int = ..., unique: bool = False) -> str: ...

    def generate_from(self, options: GenerateOptions) -> str: ...

    def generate_unique(self, size: int = ...) -> str: ...


class DefaultIdGenerator:
    """Default IdGenerator over an injectable random source, clock and counter.

    With a deterministic random source, a fixed clock and a known counter
    value the output is fully reproducible.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
        counter: ProcessCounter | None = None,
    ) -> None:
        self._config = config or GeneratorConfig()
        self._random = random_source or SecretsRandomSource()
        self._clock = clock or SystemClock()
        self._counter = counter or ProcessCounter()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def counter(self) -> ProcessCounter:
        return self._counter

    def generate(self, size: int = _CONFIGURED_SIZE, unique: bool = False) -> str:
        size = self._effective_size(size)
        if not unique:
            return random_string(size, self._random)
        return self._generate_unique(size)

    def generate_from(self, options: GenerateOptions) -> str:
        return self.generate(options.size, unique=options.unique)

    def generate_unique(self, size: int = _CONFIGURED_SIZE) -> str:
        return self.generate(size, unique=True)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _effective_size(self, size: int) -> int:
        if size is _CONFIGURED_SIZE:
            size = self._config.default_size
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError(
                f"size must be an integer, got {type(size).__name__}"
            )
        if size < 0:
            raise InvalidArgumentError(f"size must be >= 0, got {size}")
        floor = self._config.floor_policy.floor
        if size < floor:
            logger.debug(
                "Raising size %d to %s floor %d",
                size,
                self._config.floor_policy.value,
                floor,
            )
            return floor
        return size

    def _generate_unique(self, size: int) -> str:
        count = self._counter.increment()
        suffix = to_base36(self._clock.now_millis()) + to_base36(count)
        candidate = random_string(max(0, size - len(suffix)), self._random) + suffix
        if len(candidate) < size:
            # Unreachable: the prefix above already covers the shortfall.
            candidate += random_string(size - len(candidate), self._random)
        return candidate


def create_id_generator(config: GeneratorConfig | None = None) -> IdGenerator:
    """One-line factory for a generator with its own counter and default components."""
    return DefaultIdGenerator(config)


_default_generator = DefaultIdGenerator()


def default_generator() -> DefaultIdGenerator:
    """Return the process-wide generator behind the module-level functions."""
    return _default_generator


def generate_id(size: int = DEFAULT_SIZE, unique: bool = False) -> str:
    return _default_generator.generate(size, unique=unique)


def generate_id_from(options: GenerateOptions) -> str:
    return _default_generator.generate_from(options)


def generate_unique_id(size: int = DEFAULT_SIZE) -> str:
    """Convenience wrapper: ``generate_id(size, unique=True)``."""
    return generate_id(size, unique=True)


def reset_counter(value: int = 0) -> None:
    """Reset the process-wide counter. Intended for tests."""
    _default_generator.counter.reset(value)
    logger.debug("Process counter reset to %d", value)
