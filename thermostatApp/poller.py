# =============================================================================
# thermostatApp – Periodic refresh poller (QTimer)
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

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .controller import ThermostatController


class ThermostatPoller(QObject):
    """
    Periodically refreshes a ThermostatController.

    Design:
      - Uses a QTimer for the polling ticks, so it can live in the GUI thread
        or be moved to a dedicated QThread (QObject.moveToThread) together
        with its controller.
      - `start()` performs the initial load right away, then starts the timer.
      - A tick that finds a refresh already in flight is skipped; the
        controller's own guard makes this safe.

    Signals:
      - log(msg): emitted for logging/debug.
    """

    log = Signal(str)

    def __init__(
        self,
        controller: ThermostatController,
        poll_interval_s: float,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._controller = controller

        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(int(poll_interval_s * 1000))
        self._poll_timer.timeout.connect(self.tick)

    @property
    def interval_ms(self) -> int:
        return self._poll_timer.interval()

    def is_active(self) -> bool:
        return self._poll_timer.isActive()

    @Slot()
    def start(self):
        """
        Load the initial state and start periodic polling.

        Intended to be connected to QThread.started when run in a worker thread.
        """
        self.log.emit("Poller started.")
        self.tick()
        self._poll_timer.start()

    @Slot()
    def tick(self):
        """Poll tick handler."""
        if not self._controller.refresh():
            self.log.emit("Refresh already in progress, tick skipped.")

    def stop(self):
        """
        Stop polling. The controller keeps its last state.
        """
        self._poll_timer.stop()
        self.log.emit("Poller stopped.")
