"""Exceptions raised by choredist."""


class ChoreDistError(Exception):
    """Base class for user-visible choredist errors."""


class ConfigError(ChoreDistError):
    """Configuration file is missing, unreadable or invalid."""


class TemplateRenderError(ChoreDistError):
    """A message or note template could not be loaded or rendered."""


class NotificationError(ChoreDistError):
    """Sending a message or updating a note failed."""


class ScheduleError(ChoreDistError):
    """Installing or managing the launchd schedule failed."""
