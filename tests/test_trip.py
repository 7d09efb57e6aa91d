from unittest.mock import Mock

import pytest

from velokit.bicycle import Bicycle
from velokit.trip import Driver, Mechanic, Trip, TripCoordinator


@pytest.mark.parametrize("preparer", [Mechanic(), TripCoordinator(), Driver()])
def test_implements_the_preparer_role(preparer):
    assert callable(getattr(preparer, "prepare_trip", None))


def test_requests_trip_preparation():
    preparer = Mock()
    preparer.prepare_trip.return_value = []
    trip = Trip()

    trip.prepare([preparer])

    preparer.prepare_trip.assert_called_once_with(trip)


def test_prepare_collects_tasks_in_preparer_order():
    bike = Bicycle.from_config("L", [("chain", "10-speed"), ("front_shock", "Manitou", False)])
    trip = Trip(bicycles=[bike], customers=["Ada"], vehicle="van")

    tasks = trip.prepare([Mechanic(), TripCoordinator(), Driver()])

    assert tasks == [
        "pack chain: 10-speed",
        "buy food for Ada",
        "gas up van",
        "fill water tank van",
    ]


def test_driver_without_vehicle_has_nothing_to_do():
    assert Driver().prepare_trip(Trip()) == []
