"""Constants for choredist."""

import logging

LOGGER = logging.getLogger(__package__)

VERSION = "1.2.0"

DEFAULT_CONFIG_PATH = "chores_config.json"
DEFAULT_NOTE_NAME = "Chore History"

LAUNCH_AGENT_LABEL = "com.choredist.distribute"

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
