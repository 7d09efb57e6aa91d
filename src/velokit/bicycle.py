from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .builder.catalog import DescriptorLike, build_parts
from .schemas import PartsCollection


@dataclass(frozen=True)
class Bicycle:
    """A bicycle is its size plus the parts it is composed of."""

    size: str
    parts: PartsCollection = field(default_factory=PartsCollection)

    @classmethod
    def from_config(cls, size: str, config: Iterable[DescriptorLike]) -> "Bicycle":
        return cls(size=size, parts=build_parts(config))

    def spares(self) -> PartsCollection:
        return self.parts.spares()
