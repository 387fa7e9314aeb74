"""pysitemaint - Switch a web site into maintenance mode from the command line."""

from .controller import MaintenanceController
from .exceptions import ActivationFailedError, MaintenanceError, NotActiveError, TemplateNotFoundError
from .marker import MarkerFileStore
from .models import MaintenanceMarker, MaintenanceState, MaintenanceStatus
from .settings import MaintenanceSettings
from .template import TemplateInjector

__all__ = [
    "ActivationFailedError",
    "MaintenanceController",
    "MaintenanceError",
    "MaintenanceMarker",
    "MaintenanceSettings",
    "MaintenanceState",
    "MaintenanceStatus",
    "MarkerFileStore",
    "NotActiveError",
    "TemplateInjector",
    "TemplateNotFoundError",
]
