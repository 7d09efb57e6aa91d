from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Tuple, overload

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StrictBool,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError


class PartDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    needs_spare: StrictBool = Field(default=True, alias="needsSpare")

    @model_validator(mode="before")
    @classmethod
    def _from_positional(cls, value):
        if isinstance(value, (tuple, list)):
            if not 2 <= len(value) <= 3:
                raise PydanticCustomError(
                    "descriptor_shape",
                    "positional descriptor needs 2 or 3 items, got {count}",
                    {"count": len(value)},
                )
            return dict(zip(("name", "description", "needs_spare"), value))
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, cls):
            return value
        if hasattr(value, "name") and hasattr(value, "description"):
            # record-like objects, e.g. a PartRecord from another collection
            return {
                "name": value.name,
                "description": value.description,
                "needs_spare": getattr(value, "needs_spare", None),
            }
        return value

    @field_validator("needs_spare", mode="before")
    @classmethod
    def _default_needs_spare(cls, value):
        # None behaves like an omitted flag
        if value is None:
            return True
        return value


class PartRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    needs_spare: bool = True


class PartsCollection(RootModel[Tuple[PartRecord, ...]]):
    model_config = ConfigDict(frozen=True)

    root: Tuple[PartRecord, ...] = ()

    @classmethod
    def of(cls, records: Iterable[PartRecord]) -> "PartsCollection":
        return cls(tuple(records))

    def __iter__(self) -> Iterator[PartRecord]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    @overload
    def __getitem__(self, index: int) -> PartRecord: ...

    @overload
    def __getitem__(self, index: slice) -> "PartsCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return PartsCollection(self.root[index])
        return self.root[index]

    def names(self) -> List[str]:
        return [part.name for part in self.root]

    def spares(self) -> "PartsCollection":
        from .builder.spares import compute_spares

        return compute_spares(self)

    def as_list(self) -> List[dict]:
        return [part.model_dump() for part in self.root]


class BikeConfig(BaseModel):
    name: str = Field(min_length=1)
    size: str = ""
    parts: List[PartDescriptor] = Field(default_factory=list)


class PartsRequest(BaseModel):
    # descriptors are validated by the builder, not at request parsing
    parts: List[Any] = Field(default_factory=list)


class GearRequest(BaseModel):
    chainring: int = Field(gt=0)
    cog: int
    rim: float = Field(ge=0)
    tire: float = Field(ge=0)


class GearResponse(BaseModel):
    ratio: float
    gear_inches: float
    diameter: float


class BikeSummary(BaseModel):
    name: str
    size: str
    parts: List[PartRecord] = Field(default_factory=list)
    spares: List[PartRecord] = Field(default_factory=list)

