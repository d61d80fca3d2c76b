from .client import ThermostatClient
from .models import (
    ControllerState,
    FanMode,
    FanState,
    ThermostatStatus,
    MIN_TARGET_C,
    MAX_TARGET_C,
    TARGET_STEP_C,
)
from .exceptions import (
    ThermostatError,
    ThermostatEmptyResponseError,
    ThermostatApiError,
    ThermostatTransportError,
    ThermostatProtocolError,
)

__all__ = [
    "ThermostatClient",
    "ControllerState",
    "FanMode",
    "FanState",
    "ThermostatStatus",
    "MIN_TARGET_C",
    "MAX_TARGET_C",
    "TARGET_STEP_C",
    "ThermostatError",
    "ThermostatEmptyResponseError",
    "ThermostatApiError",
    "ThermostatTransportError",
    "ThermostatProtocolError",
]
