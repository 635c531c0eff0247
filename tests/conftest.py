"""Shared fixtures for choredist tests."""

import json
from pathlib import Path

import numpy as np
import pytest

from choredist.models import Chore, Person


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source so distributions are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def house_chores() -> list[Chore]:
    return [
        Chore(name="Kitchen", difficulty=6, earned=5),
        Chore(name="Bathroom", difficulty=5, earned=4),
        Chore(name="Living room", difficulty=4, earned=3),
        Chore(name="Bedroom", difficulty=3, earned=2),
    ]


@pytest.fixture
def alice_and_bob() -> list[Person]:
    return [Person(name="Alice"), Person(name="Bob")]


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A JSON config in the historical chores_config.json layout."""
    data = {
        "chores": [
            {"Name": "Kitchen", "Difficulty": 6, "Earned": 5},
            {"Name": "Bathroom", "Difficulty": 5, "Earned": 4, "Description": "Scrub the tub"},
            {"Name": "Trash", "Difficulty": 1, "Earned": 1},
        ],
        "people": [
            {"Name": "Alice", "Contact": "+15555550100", "EffortCapacity": 0},
            {
                "Name": "Bob",
                "Contact": "bob@icloud.com",
                "EffortCapacity": 15,
                "PreAssignedChores": [{"Name": "Feed the cat", "Difficulty": 2, "Earned": 1}],
            },
        ],
    }
    path = tmp_path / "chores_config.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
