"""Configuration file parsing for choredist."""

from pathlib import Path
from typing import Any

import yaml

from choredist.const import LOGGER
from choredist.errors import ConfigError
from choredist.models import Chore, Config, Person


def _lower_keys(entry: Any, what: str) -> dict[str, Any]:
    """Return entry with lower-cased keys so `Name` and `name` both match."""
    if not isinstance(entry, dict):
        raise ConfigError(f"Each {what} entry must be a mapping, got: {entry!r}")
    return {str(k).lower(): v for k, v in entry.items()}


def _non_negative_int(value: Any, field_name: str, owner: str) -> int:
    if value is None:
        return 0
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{owner}: {field_name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"{owner}: {field_name} must not be negative, got {value}")
    return value


def _parse_name(entry: dict[str, Any], what: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"Every {what} needs a non-empty Name")
    return name.strip()


def parse_chore(raw: Any) -> Chore:
    """Build a Chore from one config entry."""
    entry = _lower_keys(raw, "chore")
    name = _parse_name(entry, "chore")
    description = entry.get("description") or ""
    return Chore(
        name=name,
        difficulty=_non_negative_int(entry.get("difficulty", 0), "Difficulty", name),
        earned=_non_negative_int(entry.get("earned", 0), "Earned", name),
        description=str(description).strip(),
    )


def parse_person(raw: Any) -> Person:
    """Build a Person from one config entry, reset to its pre-assigned baseline."""
    entry = _lower_keys(raw, "person")
    name = _parse_name(entry, "person")

    pre_assigned = entry.get("preassignedchores") or []
    if not isinstance(pre_assigned, list):
        raise ConfigError(f"{name}: PreAssignedChores must be a list")

    person = Person(
        name=name,
        contact=str(entry.get("contact") or "").strip(),
        effort_capacity=_non_negative_int(
            entry.get("effortcapacity", 0), "EffortCapacity", name
        ),
        pre_assigned_chores=[parse_chore(c) for c in pre_assigned],
    )
    person.reset_to_baseline()
    return person


def load_config(config_path: Path | str) -> Config:
    """
    Load chores and people from a JSON or YAML configuration file.

    JSON is a subset of YAML, so both formats go through the same loader.
    """
    config_path = Path(config_path)
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as err:
        raise ConfigError(f"error reading file: {err}") from err
    except UnicodeDecodeError as err:
        raise ConfigError(f"{config_path.name} is not valid UTF-8: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigError(f"error parsing {config_path.name}: {err}") from err

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping with 'chores' and 'people'")

    data = _lower_keys(data, "top-level")
    raw_chores = data.get("chores") or []
    raw_people = data.get("people") or []
    if not isinstance(raw_chores, list) or not isinstance(raw_people, list):
        raise ConfigError("'chores' and 'people' must be lists")

    config = Config(
        chores=[parse_chore(c) for c in raw_chores],
        people=[parse_person(p) for p in raw_people],
    )

    if config.chores and not config.people:
        LOGGER.warning("No people configured; every chore will be left unassigned")

    LOGGER.info(
        "Loaded %d chores and %d people from %s",
        len(config.chores),
        len(config.people),
        config_path,
    )
    return config


def create_config_template(output_path: Path):
    """Create an example configuration YAML file."""
    template = {
        "chores": [
            {"Name": "Kitchen", "Difficulty": 6, "Earned": 5},
            {"Name": "Bathroom", "Difficulty": 5, "Earned": 4},
            {
                "Name": "Trash",
                "Difficulty": 1,
                "Earned": 1,
                "Description": "Take bins to the curb on Tuesday night",
            },
        ],
        "people": [
            {"Name": "Alice", "Contact": "+15555550100", "EffortCapacity": 0},
            {
                "Name": "Bob",
                "Contact": "bob@icloud.com",
                "EffortCapacity": 10,
                "PreAssignedChores": [{"Name": "Feed the cat", "Difficulty": 1, "Earned": 1}],
            },
        ],
    }

    header = """\
# Configuration file for choredist
#
# chores: every chore to distribute this run
#   Name, Difficulty (effort cost), Earned (reward in dollars), Description (optional)
#
# people: everyone who can receive chores
#   Contact: phone number or Apple ID email for iMessage (optional)
#   EffortCapacity: maximum total difficulty, 0 for no limit
#   PreAssignedChores: chores this person always does; they count toward
#     their totals before the rest are distributed

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
