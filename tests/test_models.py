"""Tests for the thermostat wire models."""

from dataclasses import FrozenInstanceError
from typing import Any

import pytest

from thermoctl.models import (
    ControllerState,
    FanMode,
    FanState,
    ThermostatStatus,
)


class TestFanMode:
    """Tests for FanMode decoding and encoding."""

    @pytest.mark.parametrize(
        ("wire", "expected"),
        [
            ("OFF", FanMode.OFF),
            ("ON", FanMode.ON),
            ("HEATING", FanMode.HEATING),
            ("COOLING", FanMode.COOLING),
        ],
    )
    def test_known_values_decode(self, wire: str, expected: FanMode) -> None:
        """Test that every known mode string maps to its member."""
        assert FanMode.from_wire(wire) is expected

    @pytest.mark.parametrize("wire", ["UNKNOWN_STRING", "heating", "", None, 3])
    def test_unknown_values_decode_to_off(self, wire: Any) -> None:
        """Test that unrecognized mode values never fail and map to OFF."""
        assert FanMode.from_wire(wire) is FanMode.OFF

    def test_wire_value_is_lower_case_name(self) -> None:
        """Test the query-string form of each mode."""
        assert [m.wire_value for m in FanMode] == ["off", "on", "heating", "cooling"]


class TestFanState:
    """Tests for FanState decoding."""

    def test_on_literal_decodes_to_on(self) -> None:
        """Test that only the literal ON is energized."""
        assert FanState.from_wire("ON") is FanState.ON

    @pytest.mark.parametrize("wire", ["anything-but-ON", "on", "OFF", None, True])
    def test_other_values_decode_to_off(self, wire: Any) -> None:
        """Test that every other value maps to OFF."""
        assert FanState.from_wire(wire) is FanState.OFF


class TestThermostatStatus:
    """Tests for ThermostatStatus.from_wire."""

    def test_from_wire_decodes_all_fields(
        self,
        sample_status_payload: dict[str, Any],
    ) -> None:
        """Test decoding of a complete record."""
        status = ThermostatStatus.from_wire(sample_status_payload)
        assert status == ThermostatStatus(24.5, 23.0, FanMode.HEATING, FanState.ON)

    def test_from_wire_is_lenient_on_enums(
        self,
        sample_status_payload: dict[str, Any],
    ) -> None:
        """Test that unknown enum strings do not break decoding."""
        sample_status_payload["mode"] = "UNKNOWN_STRING"
        sample_status_payload["switchState"] = "anything-but-ON"
        status = ThermostatStatus.from_wire(sample_status_payload)
        assert status.mode is FanMode.OFF
        assert status.switch_state is FanState.OFF
        assert status.temperature_c == 24.5

    def test_from_wire_accepts_integer_temperatures(self) -> None:
        """Test that integral JSON numbers become floats."""
        status = ThermostatStatus.from_wire(
            {"temperatureC": 21, "targetTemperatureC": 25, "mode": "ON", "switchState": "OFF"},
        )
        assert status.temperature_c == 21.0
        assert isinstance(status.target_temperature_c, float)

    @pytest.mark.parametrize("missing", ["temperatureC", "targetTemperatureC"])
    def test_from_wire_requires_temperatures(
        self,
        sample_status_payload: dict[str, Any],
        missing: str,
    ) -> None:
        """Test that a missing temperature is a decode error."""
        del sample_status_payload[missing]
        with pytest.raises(ValueError, match=missing):
            ThermostatStatus.from_wire(sample_status_payload)

    def test_from_wire_rejects_non_numeric_temperature(
        self,
        sample_status_payload: dict[str, Any],
    ) -> None:
        """Test that a string temperature is a decode error."""
        sample_status_payload["temperatureC"] = "hot"
        with pytest.raises(ValueError):
            ThermostatStatus.from_wire(sample_status_payload)

    def test_from_wire_rejects_non_object(self) -> None:
        """Test that a JSON array is a decode error."""
        with pytest.raises(ValueError):
            ThermostatStatus.from_wire([1, 2, 3])  # type: ignore[arg-type]

    def test_status_is_frozen(self, sample_status_payload: dict[str, Any]) -> None:
        """Test that a decoded status cannot be modified."""
        status = ThermostatStatus.from_wire(sample_status_payload)
        with pytest.raises(FrozenInstanceError):
            status.mode = FanMode.OFF  # type: ignore[misc]


class TestControllerState:
    """Tests for ControllerState defaults."""

    def test_defaults(self) -> None:
        """Test the state a new session starts from."""
        state = ControllerState()
        assert state.current_temperature_c == 22.0
        assert state.target_temperature_c == 22.0
        assert state.mode is FanMode.OFF
        assert state.switch_state is FanState.OFF
        assert state.is_refreshing is False
        assert state.last_error is None
