# =============================================================================
# thermostatApp – Thermostat state-reconciliation controller
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

import logging
import threading
from dataclasses import replace
from typing import Optional, Protocol

from PySide6.QtCore import QObject, Signal

from thermoctl.exceptions import ThermostatEmptyResponseError
from thermoctl.models import (
    MAX_TARGET_C,
    MIN_TARGET_C,
    TARGET_STEP_C,
    ControllerState,
    FanMode,
    ThermostatStatus,
)


_LOGGER = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Empty response from server"


class ThermostatTransport(Protocol):
    """
    Capability the controller depends on. `thermoctl.ThermostatClient` is the
    HTTP implementation; tests provide fakes.

    Both methods raise `ThermostatError` subclasses on failure. `get_status`
    may also return None to signal an absent body.
    """

    def get_status(self) -> Optional[ThermostatStatus]: ...

    def apply_settings(self, mode: FanMode, target: float) -> None: ...


class ThermostatController(QObject):
    """
    Owner of the local view of the thermostat.

    The controller keeps a single `ControllerState` snapshot and replaces it
    as a whole on every change. Presentation code either reads `state` or
    subscribes to `stateChanged`; it never mutates the state directly.

    Concurrency:
      - `refresh()` is guarded by the `is_refreshing` flag, checked and set
        under a lock, so at most one status request is in flight. Extra calls
        return immediately without touching the network.
      - `set_thermostat()` holds no lock. A command and an external refresh
        may interleave; the last completed write wins and the next refresh
        reconciles to the device's values.
      - The network call itself runs without the lock held, so the owner is
        free to run the controller in a worker QThread.

    Errors never propagate to the caller: any failure is turned into
    a `last_error` string and an `errorOccurred` emission.

    Signals:
      - stateChanged(obj): emitted with the new ControllerState after every change.
      - errorOccurred(msg): emitted whenever `last_error` is set.
      - log(msg): emitted for logging/debug.
    """

    stateChanged = Signal(object)      # ControllerState
    errorOccurred = Signal(str)
    log = Signal(str)

    def __init__(self, transport: ThermostatTransport, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._transport = transport
        self._lock = threading.Lock()
        self._state = ControllerState()

    @property
    def state(self) -> ControllerState:
        """Current immutable snapshot."""
        return self._state

    @property
    def is_refreshing(self) -> bool:
        return self._state.is_refreshing

    @property
    def last_error(self) -> Optional[str]:
        return self._state.last_error

    def refresh(self) -> bool:
        """
        Pull the authoritative status from the device.

        Clears `last_error`, requests the status and, on success, overwrites
        current temperature, target temperature, mode and switch state in a
        single snapshot replacement. On failure only `last_error` changes.
        `is_refreshing` is released as the last step in every case.

        Returns:
            False if another refresh was already in flight (no request made),
            True otherwise.
        """
        with self._lock:
            if self._state.is_refreshing:
                return False
            snap = self._replace_locked(is_refreshing=True, last_error=None)
        self.stateChanged.emit(snap)

        try:
            status = self._transport.get_status()
            if status is None:
                raise ThermostatEmptyResponseError(EMPTY_RESPONSE_MESSAGE)
            self._update(
                current_temperature_c=status.temperature_c,
                target_temperature_c=status.target_temperature_c,
                mode=status.mode,
                switch_state=status.switch_state,
            )
            self._emit_log(f"Data refreshed: {status}")

        except ThermostatEmptyResponseError:
            self._fail(EMPTY_RESPONSE_MESSAGE)

        except Exception as e:
            # Transports outside thermoctl may raise their own connection errors.
            self._fail(f"Error: {e}")

        finally:
            self._update(is_refreshing=False)

        return True

    def set_thermostat(self, new_mode: Optional[FanMode] = None, new_target: Optional[float] = None) -> None:
        """
        Send a mode and a target temperature to the device.

        Omitted arguments default to the values currently held locally, so both
        are always sent. The target is passed through without clamping.

        On success a refresh follows to pull the post-command state. On
        failure `last_error` is set and no refresh is issued. `last_error` is
        not cleared beforehand: a previous refresh error stays visible until
        the next refresh.

        Args:
            new_mode: Mode to apply, or None to resend the current one.
            new_target: Target °C to apply, or None to resend the current one.
        """
        current = self._state
        mode = new_mode if new_mode is not None else current.mode
        target = new_target if new_target is not None else current.target_temperature_c

        try:
            self._transport.apply_settings(mode, target)
        except Exception as e:
            self._fail(f"Error setting thermostat: {e}")
            return

        self._emit_log(f"Thermostat set: mode={mode.wire_value}, target={target}")
        self.refresh()

    def select_mode(self, mode: FanMode) -> None:
        """
        Optimistically show `mode`, then send it to the device.

        The local value is provisional until the refresh that follows a
        successful command.
        """
        self._update(mode=mode)
        self.set_thermostat(new_mode=mode)

    def step_target(self, delta: float) -> None:
        """
        Move the target by `delta` °C, stopping at the bound it moves towards.

        When the target already sits at the bound in the direction of the step
        nothing happens. Otherwise the value, clamped only on that side, is
        written optimistically and sent to the device.
        """
        target = self._state.target_temperature_c
        if not delta:
            return
        if delta > 0 and target >= MAX_TARGET_C:
            return
        if delta < 0 and target <= MIN_TARGET_C:
            return

        if delta > 0:
            new_target = min(target + delta, MAX_TARGET_C)
        else:
            new_target = max(target + delta, MIN_TARGET_C)
        self._update(target_temperature_c=new_target)
        self.set_thermostat(new_target=new_target)

    def increase_target(self) -> None:
        self.step_target(TARGET_STEP_C)

    def decrease_target(self) -> None:
        self.step_target(-TARGET_STEP_C)

    def _replace_locked(self, **changes) -> ControllerState:
        self._state = replace(self._state, **changes)
        return self._state

    def _update(self, **changes) -> ControllerState:
        with self._lock:
            snap = self._replace_locked(**changes)
        self.stateChanged.emit(snap)
        return snap

    def _fail(self, message: str) -> None:
        self._update(last_error=message)
        self._emit_log(message, logging.ERROR)
        self.errorOccurred.emit(message)

    def _emit_log(self, message: str, level: int = logging.DEBUG) -> None:
        _LOGGER.log(level, message)
        self.log.emit(message)
