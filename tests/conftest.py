"""Pytest configuration and fixtures for thermostat tests."""

import threading
from typing import Any
from unittest.mock import Mock

import pytest
import requests
from PySide6.QtCore import QCoreApplication

from thermoctl.models import FanMode, FanState, ThermostatStatus
from thermostatApp.controller import ThermostatController


class FakeTransport:
    """In-memory transport recording every call.

    `status` is returned by get_status() unless `status_error` is set, in
    which case it is raised. `apply_error` works the same for apply_settings().
    When `block` is True, get_status() waits for `release` after setting
    `entered`, which lets tests hold a refresh in flight.
    """

    def __init__(self, status: ThermostatStatus | None = None) -> None:
        self.status = status
        self.status_error: Exception | None = None
        self.apply_error: Exception | None = None
        self.status_calls = 0
        self.apply_calls: list[tuple[FanMode, float]] = []
        self.on_apply = None
        self.block = False
        self.entered = threading.Event()
        self.release = threading.Event()

    def get_status(self) -> ThermostatStatus | None:
        self.status_calls += 1
        if self.block:
            self.entered.set()
            self.release.wait(timeout=5)
        if self.status_error is not None:
            raise self.status_error
        return self.status

    def apply_settings(self, mode: FanMode, target: float) -> None:
        self.apply_calls.append((mode, target))
        if self.apply_error is not None:
            raise self.apply_error
        if self.on_apply is not None:
            self.on_apply(mode, target)


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """Fixture providing the process-wide Qt core application (needed by QTimer)."""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def heating_status() -> ThermostatStatus:
    """Fixture providing the status used by most refresh scenarios."""
    return ThermostatStatus(
        temperature_c=24.5,
        target_temperature_c=23.0,
        mode=FanMode.HEATING,
        switch_state=FanState.ON,
    )


@pytest.fixture
def sample_status_payload() -> dict[str, Any]:
    """Fixture providing a status JSON record as sent by the device."""
    return {
        "temperatureC": 24.5,
        "targetTemperatureC": 23.0,
        "mode": "HEATING",
        "switchState": "ON",
    }


@pytest.fixture
def transport(heating_status: ThermostatStatus) -> FakeTransport:
    """Fixture providing a fake transport answering with `heating_status`."""
    return FakeTransport(heating_status)


@pytest.fixture
def controller(transport: FakeTransport) -> ThermostatController:
    """Fixture providing a controller bound to the fake transport."""
    return ThermostatController(transport)


def make_response(
    status_code: int = 200,
    text: str = "",
    reason: str = "OK",
) -> Mock:
    """Build a requests.Response stand-in.

    Args:
        status_code: HTTP status code.
        text: Body text.
        reason: HTTP reason phrase.

    Returns:
        Mock with the attributes the client reads.

    """
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    response.reason = reason
    return response


@pytest.fixture
def mock_session() -> Mock:
    """Fixture providing a requests.Session mock."""
    return Mock(spec=requests.Session)
