"""
齿轮与车轮 - Gearing

Gear 只依赖“可求直径”的角色（diameterizable），而不是具体的 Wheel 类。
Gear depends on the diameterizable role, not on the concrete Wheel class.
"""

from __future__ import annotations

import math
from typing import Optional, Protocol, runtime_checkable

from loguru import logger

from .errors import GearingError


@runtime_checkable
class Diameterizable(Protocol):
    @property
    def diameter(self) -> float: ...


class GearObserver(Protocol):
    def changed(self, chainring: int, cog: int) -> object: ...


class Wheel:
    def __init__(self, rim: float, tire: float):
        self.rim = rim
        self.tire = tire

    @property
    def diameter(self) -> float:
        return self.rim + (self.tire * 2)

    @property
    def circumference(self) -> float:
        return self.diameter * math.pi

    def __repr__(self) -> str:
        return f"Wheel(rim={self.rim!r}, tire={self.tire!r})"


class Gear:
    """
    齿轮 - Gear

    ratio = chainring / cog；gear_inches = ratio * wheel.diameter。
    修改齿数时通知 observer.changed(chainring, cog)。
    Changing either tooth count notifies observer.changed(chainring, cog).
    """

    def __init__(
        self,
        chainring: int,
        cog: int,
        wheel: Optional[Diameterizable] = None,
        observer: Optional[GearObserver] = None,
    ):
        _check_cog(cog)
        self.chainring = chainring
        self.cog = cog
        self.wheel = wheel
        self.observer = observer

    @property
    def ratio(self) -> float:
        return self.chainring / float(self.cog)

    @property
    def gear_inches(self) -> float:
        if self.wheel is None:
            raise GearingError("gear inches need a wheel with a diameter")
        return self.ratio * self.wheel.diameter

    def set_cog(self, new_cog: int) -> None:
        _check_cog(new_cog)
        self.cog = new_cog
        self.changed()

    def set_chainring(self, new_chainring: int) -> None:
        self.chainring = new_chainring
        self.changed()

    def changed(self) -> None:
        logger.debug("gear changed to {}x{}", self.chainring, self.cog)
        if self.observer is not None:
            self.observer.changed(self.chainring, self.cog)


def _check_cog(cog: int) -> None:
    if cog <= 0:
        raise GearingError(f"cog must be positive, got {cog}")
