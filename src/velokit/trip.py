"""
行程准备 - Trip Preparation

Trip 只认识 preparer 角色：任何实现 prepare_trip(trip) 的对象都可以参与准备。
Trip only knows the preparer role: anything with prepare_trip(trip) takes part.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Protocol

from loguru import logger

from .bicycle import Bicycle


class Preparer(Protocol):
    def prepare_trip(self, trip: "Trip") -> List[str]: ...


@dataclass
class Trip:
    bicycles: List[Bicycle] = field(default_factory=list)
    customers: List[str] = field(default_factory=list)
    vehicle: str = ""

    def prepare(self, preparers: Iterable[Preparer]) -> List[str]:
        tasks: List[str] = []
        for preparer in preparers:
            tasks.extend(preparer.prepare_trip(self))
        logger.debug("trip prepared with {} task(s)", len(tasks))
        return tasks


class Mechanic:
    def prepare_trip(self, trip: Trip) -> List[str]:
        tasks: List[str] = []
        for bicycle in trip.bicycles:
            tasks.extend(self.prepare_bicycle(bicycle))
        return tasks

    def prepare_bicycle(self, bicycle: Bicycle) -> List[str]:
        return [f"pack {part.name}: {part.description}" for part in bicycle.spares()]


class TripCoordinator:
    def prepare_trip(self, trip: Trip) -> List[str]:
        return [f"buy food for {customer}" for customer in trip.customers]


class Driver:
    def prepare_trip(self, trip: Trip) -> List[str]:
        if not trip.vehicle:
            return []
        return [f"gas up {trip.vehicle}", f"fill water tank {trip.vehicle}"]
