from .controller import ThermostatController, ThermostatTransport
from .poller import ThermostatPoller

__all__ = [
    "ThermostatController",
    "ThermostatTransport",
    "ThermostatPoller",
]
