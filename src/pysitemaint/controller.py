"""Controller Module to activate, deactivate and inspect the maintenance mode of a web site.

The maintenance mode is switched on by the presence of a marker file in the
install root of the site. A timed activation persists a timestamp that is
ten minutes (the grace window) earlier than the requested end, because the
site itself treats a marker as stale ten minutes after its timestamp.
"""

__author__ = "The pysitemaint maintainers"
__copyright__ = "Copyright (C) 2026, The pysitemaint maintainers"
__maintainer__ = "The pysitemaint maintainers"

import logging
import math
import os
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from .exceptions import ActivationFailedError, NotActiveError
from .marker import MarkerFileStore
from .models import MaintenanceMarker, MaintenanceState, MaintenanceStatus
from .template import TemplateInjector, resolve_template

default_logger = logging.getLogger("pysitemaint.controller")

GRACE_PERIOD = timedelta(minutes=10)


def utc_now() -> datetime:
    """Return the current time as a timezone aware datetime."""

    return datetime.now(UTC)


class MaintenanceController:
    """Orchestrate the marker file and the template override of a web site.

    Attributes:
        logger (logging.Logger): Logger for the class.
        marker (MarkerFileStore): Store for the maintenance marker file.
        injector (TemplateInjector): Editor for the maintenance page slot.

    """

    # Only class variables or class-wide constants should be defined here:

    logger: logging.Logger = default_logger

    def __init__(
        self,
        site_root: str,
        content_dir: str | None = None,
        marker_file: str = ".maintenance",
        template_file: str = "maintenance.php",
        tool_name: str = "WP-CLI",
        clock: Callable[[], datetime] = utc_now,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the MaintenanceController object.

        Args:
            site_root (str):
                The install root of the web site (holds the marker file).
            content_dir (str | None, optional):
                The content root of the web site. Relative templates are resolved
                against it. Defaults to <site_root>/wp-content.
            marker_file (str, optional):
                Name of the marker file relative to site_root. Defaults to ".maintenance".
            template_file (str, optional):
                Name of the maintenance page slot relative to content_dir.
                Defaults to "maintenance.php".
            tool_name (str, optional):
                Name written into the template override delimiters. Defaults to "WP-CLI".
            clock (Callable[[], datetime], optional):
                Source of the current (timezone aware) time. Defaults to utc_now.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("controller")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self._site_root = site_root
        self._content_dir = content_dir or os.path.join(site_root, "wp-content")
        self._template_path = os.path.join(self._content_dir, template_file)
        self._clock = clock

        self.marker = MarkerFileStore(path=os.path.join(site_root, marker_file), logger=self.logger)
        self.injector = TemplateInjector(tool_name=tool_name, logger=self.logger)

    # end method definition

    @property
    def template_path(self) -> str:
        """Return the path of the maintenance page slot."""

        return self._template_path

    # end method definition

    def now(self) -> datetime:
        """Return the current time of the configured clock.

        A naive datetime from the clock is taken as local time.
        """

        now = self._clock()
        if now.tzinfo is None:
            now = now.astimezone()

        return now

    # end method definition

    def _deactivation_time(self, marker: MaintenanceMarker) -> int | None:
        """Derive the effective end of maintenance mode from a marker.

        Args:
            marker (MaintenanceMarker):
                The parsed marker file.

        Returns:
            int | None:
                The persisted timestamp plus the grace window (seconds since the
                epoch), or None if the marker has no timestamp.

        """

        if marker.timestamp is None:
            return None

        return marker.timestamp + int(GRACE_PERIOD.total_seconds())

    # end method definition

    def is_on(self) -> bool:
        """Check if maintenance mode is effectively on.

        Returns:
            bool:
                False if there is no marker file. True if the marker has no
                timestamp. Otherwise whether the effective end is in the future.

        """

        marker = self.marker.read()
        if marker is None:
            return False

        deactivation_time = self._deactivation_time(marker)
        if deactivation_time is None:
            return True

        return deactivation_time > self.now().timestamp()

    # end method definition

    def state(self) -> MaintenanceState:
        """Return the effective state of the maintenance mode.

        Returns:
            MaintenanceState:
                OFF, ON_INDEFINITE or ON_TIMED.

        """

        if not self.is_on():
            return MaintenanceState.OFF

        marker = self.marker.read()
        if marker is None or marker.timestamp is None:
            return MaintenanceState.ON_INDEFINITE

        return MaintenanceState.ON_TIMED

    # end method definition

    def activate(self, duration: int | None = None, template: str | None = None) -> str:
        """Activate maintenance mode.

        Args:
            duration (int | None, optional):
                Duration of the maintenance in minutes. None activates it until
                it is deactivated explicitly.
            template (str | None, optional):
                Custom template to display. Absolute if it starts with a path
                separator, otherwise relative to the content root.

        Returns:
            str:
                The success message.

        Raises:
            ValueError:
                If the duration is not a positive number of minutes.
            TemplateNotFoundError:
                If the template does not exist. Nothing has been changed.
            ActivationFailedError:
                If the marker file cannot be written.

        """

        if duration is not None and duration <= 0:
            raise ValueError("Duration must be a positive number of minutes, got -> {}".format(duration))

        if template:
            template_path = resolve_template(template=template, content_dir=self._content_dir)
            if os.path.normpath(template_path) != os.path.normpath(self._template_path):
                self.injector.insert(target_path=self._template_path, template_path=template_path)
            else:
                self.logger.debug("Template -> '%s' is the default maintenance page", template_path)

        timestamp = None
        if duration:
            end = int(self.now().timestamp()) + duration * 60
            timestamp = end - int(GRACE_PERIOD.total_seconds())

        try:
            self.marker.write(timestamp=timestamp)
        except OSError as error:
            self.logger.error(
                "Cannot write maintenance marker -> '%s'; error -> %s",
                self.marker.path,
                str(error),
            )
            raise ActivationFailedError from error

        self.logger.info(
            "Activated maintenance mode%s",
            " for {} minute(s)".format(duration) if duration else "",
        )

        message = "Maintenance mode is now activated"
        if duration:
            message += " for {} {}".format(duration, "minute" if duration == 1 else "minutes")

        return message + "."

    # end method definition

    def deactivate(self) -> str:
        """Deactivate maintenance mode and remove the template override.

        Returns:
            str:
                The success message.

        Raises:
            NotActiveError:
                If maintenance mode is not on. Nothing has been changed.
            OSError:
                If the maintenance page slot cannot be cleaned up.

        """

        if not self.is_on():
            raise NotActiveError

        try:
            self.marker.delete()
        except OSError as error:
            # Keep going, the template override still has to be removed.
            self.logger.warning(
                "Cannot delete maintenance marker -> '%s'; error -> %s",
                self.marker.path,
                str(error),
            )

        self.injector.remove(target_path=self._template_path)

        self.logger.info("Deactivated maintenance mode")

        return "Maintenance mode is now deactivated."

    # end method definition

    def status(self) -> MaintenanceStatus:
        """Report the effective maintenance mode status. Nothing is changed.

        Returns:
            MaintenanceStatus:
                Whether maintenance mode is on and, if it is timed, the
                effective end and the time remaining (whole seconds).

        """

        if not self.is_on():
            return MaintenanceStatus(enabled=False)

        marker = self.marker.read()
        deactivation_time = self._deactivation_time(marker) if marker else None
        if deactivation_time is None:
            return MaintenanceStatus(enabled=True)

        now = self.now()

        try:
            expiry = datetime.fromtimestamp(deactivation_time, tz=now.tzinfo)
        except (OverflowError, ValueError, OSError):
            self.logger.warning(
                "Maintenance marker -> '%s' has an out of range timestamp -> %s",
                self.marker.path,
                marker.timestamp,
            )
            return MaintenanceStatus(enabled=True)

        remaining = math.floor(deactivation_time - now.timestamp())

        return MaintenanceStatus(
            enabled=True,
            expires_at=expiry,
            remaining=timedelta(seconds=max(remaining, 0)),
        )

    # end method definition
