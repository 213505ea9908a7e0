"""Generation options and generator configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_SIZE = 7


class FloorPolicy(str, Enum):
    STRICT = "strict"  # sizes below 7 are raised to 7
    PERMISSIVE = "permissive"  # sizes below 1 are raised to 1

    @property
    def floor(self) -> int:
        return 7 if self is FloorPolicy.STRICT else 1


@dataclass(frozen=True)
class GenerateOptions:
    size: int = DEFAULT_SIZE
    unique: bool = False


@dataclass
class GeneratorConfig:
    floor_policy: FloorPolicy = FloorPolicy.STRICT
    default_size: int = DEFAULT_SIZE
