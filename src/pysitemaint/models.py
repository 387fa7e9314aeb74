"""Define Models for the maintenance mode state."""

from datetime import datetime, timedelta
from email.utils import format_datetime
from enum import Enum

from pydantic import BaseModel


class MaintenanceState(str, Enum):
    """Effective state of the maintenance mode."""

    OFF = "off"
    ON_INDEFINITE = "on_indefinite"
    ON_TIMED = "on_timed"


class MaintenanceMarker(BaseModel):
    """Content of an existing maintenance marker file.

    timestamp is the persisted integer (seconds since the epoch) or None
    if the file exists but no integer assignment could be found in it.
    """

    timestamp: int | None = None


class MaintenanceStatus(BaseModel):
    """Status object of the maintenance mode."""

    enabled: bool
    expires_at: datetime | None = None
    remaining: timedelta | None = None

    @property
    def message(self) -> str:
        """Human readable status line."""

        if not self.enabled:
            return "Maintenance mode is currently off."

        if self.expires_at is None:
            return "Maintenance mode is currently on indefinitely."

        return "Maintenance mode is currently on until {} ({} to go).".format(
            format_datetime(self.expires_at),
            format_remaining(self.remaining),
        )

    def __str__(self) -> str:
        return self.message


def format_remaining(remaining: timedelta | None) -> str:
    """Render a duration as "H hours, M minutes and S seconds".

    Args:
        remaining (timedelta | None):
            The duration. None or negative values render as zero.

    Returns:
        str:
            The formatted duration.

    """

    total_seconds = max(int(remaining.total_seconds()), 0) if remaining else 0
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    return "{} hours, {} minutes and {} seconds".format(hours, minutes, seconds)
