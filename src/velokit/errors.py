from __future__ import annotations


class VelokitError(Exception):
    """Base class for domain errors raised by velokit."""


class GearingError(VelokitError):
    pass


class ScheduleError(VelokitError):
    pass


class UnknownBikeError(VelokitError):
    def __init__(self, name: str):
        super().__init__(f"unknown bike: {name}")
        self.name = name
