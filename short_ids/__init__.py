"""short_ids: short random identifiers with an optional time+counter suffix."""

import logging

from short_ids.config import FloorPolicy, GenerateOptions, GeneratorConfig
from short_ids.core.alphabet import ALPHABET
from short_ids.core.errors import (
    InvalidArgumentError,
    RandomSourceUnavailableError,
    ShortIdError,
)
from short_ids.generator import (
    DefaultIdGenerator,
    IdGenerator,
    create_id_generator,
    default_generator,
    generate_id,
    generate_id_from,
    generate_unique_id,
    reset_counter,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALPHABET",
    "FloorPolicy",
    "GenerateOptions",
    "GeneratorConfig",
    "InvalidArgumentError",
    "RandomSourceUnavailableError",
    "ShortIdError",
    "DefaultIdGenerator",
    "IdGenerator",
    "create_id_generator",
    "default_generator",
    "generate_id",
    "generate_id_from",
    "generate_unique_id",
    "reset_counter",
]
