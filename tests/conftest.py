from pathlib import Path

import pytest

from velokit.data import BikeConfigRepository


ROOT = Path(__file__).resolve().parents[1]

ROAD_CONFIG = [
    ("chain", "10-speed"),
    ("tire_size", "23"),
    ("tape_color", "red"),
]

MOUNTAIN_CONFIG = [
    ("chain", "10-speed"),
    ("tire_size", "2.1"),
    ("front_shock", "Manitou", False),
    ("rear_shock", "Fox"),
]


@pytest.fixture
def repo():
    return BikeConfigRepository(ROOT / "data" / "bikes.json")
