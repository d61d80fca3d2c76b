# =============================================================================
# thermoctl Library – Status and State Models
# -----------------------------------------------------------------------------
# Copyright (c) The thermoctl contributors. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    The thermoctl contributors
#  @version 1.0.0
#  @date 2026-10-19
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# Operator range for the target setpoint (°C). Callers clamp, the controller
# and the client pass values through untouched.
MIN_TARGET_C = 15.0
MAX_TARGET_C = 35.0
TARGET_STEP_C = 1.0

DEFAULT_TEMPERATURE_C = 22.0


class FanMode(Enum):
    """
    Operating mode of the thermostat.

    Values are the upper-case strings reported by `/thermostat/status`.
    """

    OFF = "OFF"
    ON = "ON"
    HEATING = "HEATING"
    COOLING = "COOLING"

    @property
    def wire_value(self) -> str:
        """Lower-cased form expected by `/set_thermostat?mode=`."""
        return self.name.lower()

    @classmethod
    def from_wire(cls, value: Any) -> "FanMode":
        """
        Lenient decode: any unrecognized value maps to `FanMode.OFF`.
        """
        for member in cls:
            if member.value == value:
                return member
        return cls.OFF


class FanState(Enum):
    """
    Whether the fan relay is currently energized. Independent of `FanMode`.
    """

    OFF = "OFF"
    ON = "ON"

    @classmethod
    def from_wire(cls, value: Any) -> "FanState":
        # Only the literal "ON" counts as energized.
        return cls.ON if value == "ON" else cls.OFF


@dataclass(frozen=True)
class ThermostatStatus:
    """
    Immutable status record returned by `GET /thermostat/status`.

    Attributes:
        temperature_c:
            Current sensor reading (°C).

        target_temperature_c:
            Setpoint currently applied by the device (°C). The device may
            clamp a requested target, so this can differ from the last value
            sent.

        mode:
            Operating mode, decoded leniently from the wire string.

        switch_state:
            Relay state, decoded leniently from the wire string.
    """

    temperature_c: float
    target_temperature_c: float
    mode: FanMode
    switch_state: FanState

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ThermostatStatus":
        """
        Build a status from the decoded JSON object.

        Args:
            data: Mapping with keys `temperatureC`, `targetTemperatureC`,
                `mode` and `switchState`.

        Returns:
            ThermostatStatus instance.

        Raises:
            ValueError:
                If `data` is not a mapping or a temperature field is missing
                or not numeric. Unknown `mode`/`switchState` strings never
                raise.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        return cls(
            temperature_c=_as_float(data, "temperatureC"),
            target_temperature_c=_as_float(data, "targetTemperatureC"),
            mode=FanMode.from_wire(data.get("mode")),
            switch_state=FanState.from_wire(data.get("switchState")),
        )


@dataclass(frozen=True)
class ControllerState:
    """
    Snapshot of the controller's local view of the thermostat.

    A new instance replaces the previous one on every change, so observers
    always see all fields coming from the same update.

    Attributes:
        current_temperature_c: Last sensor reading; written only by a
            successful refresh.
        target_temperature_c: Setpoint; may hold an optimistic value until the
            next refresh.
        mode: Operating mode; may hold an optimistic value until the next
            refresh.
        switch_state: Relay state as last reported by the device.
        is_refreshing: True while exactly one refresh is in flight.
        last_error: Human-readable description of the last failure, if any.
    """

    current_temperature_c: float = DEFAULT_TEMPERATURE_C
    target_temperature_c: float = DEFAULT_TEMPERATURE_C
    mode: FanMode = FanMode.OFF
    switch_state: FanState = FanState.OFF
    is_refreshing: bool = False
    last_error: Optional[str] = None


def _as_float(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    # bool is an int subclass but never a valid temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field {key!r} must be a number, got {value!r}")
    return float(value)
