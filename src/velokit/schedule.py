"""
排期模块 - Scheduling

可排期能力以显式传入的函数和 Schedule 对象表达，而不是混入到各个类中。
Schedulability is a plain function over an explicitly supplied Schedule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Hashable, List, Protocol, Tuple

from loguru import logger

from .config import DEFAULT_LEAD_DAYS
from .errors import ScheduleError

LEAD_DAYS: Dict[str, int] = {
    "bicycle": 1,
    "vehicle": 3,
    "mechanic": 4,
}


def lead_days_for(kind: str) -> int:
    return LEAD_DAYS.get(kind, DEFAULT_LEAD_DAYS)


class ScheduleBook(Protocol):
    def is_scheduled(self, target: Hashable, start: date, end: date) -> bool: ...


@dataclass
class Schedule:
    """内存中的预订簿 - In-memory booking book; overlap is inclusive."""

    bookings: Dict[Hashable, List[Tuple[date, date]]] = field(default_factory=dict)

    def book(self, target: Hashable, start: date, end: date) -> None:
        _check_range(start, end)
        self.bookings.setdefault(target, []).append((start, end))

    def is_scheduled(self, target: Hashable, start: date, end: date) -> bool:
        _check_range(start, end)
        for booked_start, booked_end in self.bookings.get(target, []):
            if booked_start <= end and start <= booked_end:
                return True
        return False


def is_schedulable(
    target: Hashable,
    start: date,
    end: date,
    schedule: ScheduleBook,
    lead_days: int = 0,
) -> bool:
    """target 在 [start - lead_days, end] 内没有预订时可排期"""
    _check_range(start, end)
    window_start = start - timedelta(days=lead_days)
    scheduled = schedule.is_scheduled(target, window_start, end)
    logger.debug(
        "{} scheduled between {} and {}: {}", target, window_start, end, scheduled
    )
    return not scheduled


def _check_range(start: date, end: date) -> None:
    if end < start:
        raise ScheduleError(f"end {end} is before start {start}")
