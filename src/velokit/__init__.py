"""velokit: bicycle parts catalogue and spares calculation."""

from .bicycle import Bicycle
from .builder import build_parts, compute_spares, create_part, spares_by_name
from .errors import GearingError, ScheduleError, UnknownBikeError, VelokitError
from .schemas import PartDescriptor, PartRecord, PartsCollection

__all__ = [
    "Bicycle",
    "build_parts",
    "compute_spares",
    "create_part",
    "spares_by_name",
    "GearingError",
    "ScheduleError",
    "UnknownBikeError",
    "VelokitError",
    "PartDescriptor",
    "PartRecord",
    "PartsCollection",
]
