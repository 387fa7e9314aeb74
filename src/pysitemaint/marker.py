"""Marker Module to read and write the maintenance flag file.

The file is a PHP snippet that the web site evaluates on each request:

    <?php $upgrading = 1700000000;

The integer is the persisted timestamp (seconds since the epoch). The
expression "time()" is written instead when maintenance mode has no
timeout, so the site keeps treating the file as fresh.
"""

__author__ = "The pysitemaint maintainers"
__copyright__ = "Copyright (C) 2026, The pysitemaint maintainers"
__maintainer__ = "The pysitemaint maintainers"

import logging
import os
import re

from .models import MaintenanceMarker

default_logger = logging.getLogger("pysitemaint.marker")

MARKER_VARIABLE = "upgrading"
ALWAYS_ON = "time()"

TIMESTAMP_PATTERN = re.compile(r"\$" + MARKER_VARIABLE + r"\s*=\s*([0-9]+)")


class MarkerFileStore:
    """Durable representation of whether maintenance mode is on, and until when."""

    # Only class variables or class-wide constants should be defined here:

    logger: logging.Logger = default_logger

    def __init__(self, path: str, logger: logging.Logger = default_logger) -> None:
        """Initialize the MarkerFileStore object.

        Args:
            path (str):
                The path of the marker file.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("marker")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self._path = path

    # end method definition

    @property
    def path(self) -> str:
        """Return the path of the marker file."""

        return self._path

    # end method definition

    def exists(self) -> bool:
        """Check if the marker file exists.

        Returns:
            bool:
                True if the marker file exists, False otherwise.

        """

        return os.path.isfile(self._path)

    # end method definition

    def write(self, timestamp: int | None = None) -> None:
        """Write (or overwrite) the marker file.

        Args:
            timestamp (int | None, optional):
                The timestamp to persist. None writes the "always on" expression.

        Raises:
            OSError:
                If the file cannot be written.

        """

        value = ALWAYS_ON if timestamp is None else str(int(timestamp))

        with open(self._path, "w", encoding="utf-8") as marker_file:
            marker_file.write("<?php ${} = {};".format(MARKER_VARIABLE, value))

        self.logger.debug("Wrote maintenance marker -> '%s' with value -> %s", self._path, value)

    # end method definition

    def read(self) -> MaintenanceMarker | None:
        """Read and parse the marker file.

        Returns:
            MaintenanceMarker | None:
                None if the file does not exist. Otherwise a marker with the first
                integer assigned to the marker variable, or with timestamp None if
                no such assignment can be found.

        """

        try:
            with open(self._path, mode="rb") as marker_file:
                content = marker_file.read().decode("utf-8", errors="replace")
        except FileNotFoundError:
            return None

        match = TIMESTAMP_PATTERN.search(content)
        if not match:
            self.logger.debug("No timestamp found in maintenance marker -> '%s'", self._path)
            return MaintenanceMarker()

        return MaintenanceMarker(timestamp=int(match.group(1)))

    # end method definition

    def delete(self) -> None:
        """Delete the marker file. A missing file is not an error.

        Raises:
            OSError:
                If the file exists but cannot be removed.

        """

        try:
            os.remove(self._path)
        except FileNotFoundError:
            return

        self.logger.debug("Deleted maintenance marker -> '%s'", self._path)

    # end method definition
