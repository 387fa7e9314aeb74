"""Shared fixtures for the maintenance command tests."""

from datetime import UTC, datetime, timedelta

import pytest

from pysitemaint.controller import MaintenanceController

START = datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: int) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def site(tmp_path):
    """A site root with an empty content directory."""

    (tmp_path / "wp-content").mkdir()
    return tmp_path


@pytest.fixture
def controller(site, clock) -> MaintenanceController:
    return MaintenanceController(site_root=str(site), clock=clock)


@pytest.fixture
def slot(site):
    """Path of the maintenance page slot."""

    return site / "wp-content" / "maintenance.php"


@pytest.fixture
def custom_template(site):
    template = site / "wp-content" / "custom.php"
    template.write_text("<h1>Back soon</h1>\n", encoding="utf-8")
    return template
