from datetime import date

import pytest

from velokit.errors import ScheduleError
from velokit.schedule import LEAD_DAYS, Schedule, is_schedulable, lead_days_for

START = date(2015, 9, 4)
END = date(2015, 9, 10)


def test_free_target_is_schedulable():
    assert is_schedulable("bike-1", START, END, Schedule(), lead_days=1)


def test_booking_inside_window_blocks():
    schedule = Schedule()
    schedule.book("bike-1", date(2015, 9, 8), date(2015, 9, 12))

    assert not is_schedulable("bike-1", START, END, schedule)
    assert is_schedulable("bike-2", START, END, schedule)


def test_lead_days_extend_the_window_backwards():
    schedule = Schedule()
    schedule.book("bike-1", date(2015, 9, 1), date(2015, 9, 3))

    assert is_schedulable("bike-1", START, END, schedule, lead_days=0)
    assert not is_schedulable("bike-1", START, END, schedule, lead_days=lead_days_for("bicycle"))


def test_lead_day_defaults():
    assert LEAD_DAYS == {"bicycle": 1, "vehicle": 3, "mechanic": 4}
    assert lead_days_for("unicycle") == 0


def test_reversed_range_raises():
    with pytest.raises(ScheduleError):
        is_schedulable("bike-1", END, START, Schedule())


def test_schedule_book_is_any_object_with_is_scheduled():
    class AlwaysBooked:
        def is_scheduled(self, target, start, end):
            return True

    assert not is_schedulable("van", START, END, AlwaysBooked(), lead_days=3)
