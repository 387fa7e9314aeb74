"""Definition for all custom exception."""

__author__ = "The pysitemaint maintainers"
__copyright__ = "Copyright (C) 2026, The pysitemaint maintainers"
__maintainer__ = "The pysitemaint maintainers"


class MaintenanceError(Exception):
    """Base exception for all failures of a maintenance command."""

    def __init__(self, message: str) -> None:
        """Initialize the MaintenanceError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)


class TemplateNotFoundError(MaintenanceError):
    """Custom exception if the requested maintenance template does not exist."""

    def __init__(self, template_path: str) -> None:
        """Initialize the TemplateNotFoundError with the missing path.

        Args:
            template_path (str):
                The resolved path of the template that could not be found.

        """
        self.template_path = template_path
        super().__init__(
            "We did nothing because the template file '{}' does not exist.".format(template_path),
        )


class ActivationFailedError(MaintenanceError):
    """Custom exception if the maintenance marker file could not be written."""

    def __init__(self, message: str = "Could not activate maintenance mode.") -> None:
        """Initialize the ActivationFailedError with a message.

        Args:
            message (str, optional):
                The error message.

        """
        super().__init__(message)


class NotActiveError(MaintenanceError):
    """Custom exception if maintenance mode is deactivated while it is off."""

    def __init__(self, message: str = "We did nothing because maintenance mode was not activated.") -> None:
        """Initialize the NotActiveError with a message.

        Args:
            message (str, optional):
                The error message.

        """
        super().__init__(message)
