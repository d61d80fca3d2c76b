# =============================================================================
# ThermostatClient - HTTP client for thermostat devices
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

import json
import logging
import time
from typing import Any, Dict, Optional

import requests

from .exceptions import (
    ThermostatApiError,
    ThermostatEmptyResponseError,
    ThermostatProtocolError,
    ThermostatTransportError,
)
from .models import FanMode, ThermostatStatus


_LOGGER = logging.getLogger(__name__)


class ThermostatClient:
    """
    Minimal HTTP client for a thermostat that exposes two plain GET endpoints:

      - `/thermostat/status` returning a JSON status record
      - `/set_thermostat?mode=<mode>&target=<celsius>` applying new settings

    This client focuses on:
      - Mapping every failure onto the library exception taxonomy
      - Lenient decoding of the status record (see `ThermostatStatus`)
      - Transport reliability (bounded retries + delay)

    No authentication is performed; the device is expected on a trusted LAN.
    """

    STATUS_PATH = "/thermostat/status"
    SET_PATH = "/set_thermostat"

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 30.0,
        retries: int = 1,
        retry_delay_s: float = 1.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a ThermostatClient.

        Args:
            base_url:
                Base URL of the device, e.g. 'http://192.168.1.125'.
                Trailing slashes are removed.
            timeout_s:
                HTTP request timeout in seconds, applied to every call.
            retries:
                Number of attempts for transient transport errors (>= 1).
                HTTP status errors are never retried.
            retry_delay_s:
                Delay in seconds between retry attempts.
            session:
                Optional preconfigured requests.Session. If not provided, a new
                session is created.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.retries = max(1, int(retries))
        self.retry_delay_s = float(retry_delay_s)

        self.session = session or requests.Session()

    @property
    def status_url(self) -> str:
        """Full URL of the status endpoint."""
        return f"{self.base_url}{self.STATUS_PATH}"

    @property
    def set_url(self) -> str:
        """Full URL of the settings endpoint."""
        return f"{self.base_url}{self.SET_PATH}"

    def get_status(self) -> ThermostatStatus:
        """
        Fetch the current thermostat status.

        Returns:
            Decoded ThermostatStatus.

        Raises:
            ThermostatApiError:
                If the device answers with a non-2xx status code.
            ThermostatEmptyResponseError:
                If the device answers 2xx without a usable body.
            ThermostatProtocolError:
                If the body is not valid JSON or lacks the temperature fields.
            ThermostatTransportError:
                On connection errors or timeouts after retries.
        """
        r = self._get(self.status_url)

        raw = r.text
        if not raw or not raw.strip():
            raise ThermostatEmptyResponseError()

        try:
            data = json.loads(raw)
            if data is None:
                raise ThermostatEmptyResponseError()
            status = ThermostatStatus.from_wire(data)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too.
            raise ThermostatProtocolError(f"Invalid status payload: {exc}") from exc

        _LOGGER.debug("Status received: %s", status)
        return status

    def apply_settings(self, mode: FanMode, target: float) -> None:
        """
        Apply a mode and a target temperature on the device.

        Both values are always sent. The response body is ignored.

        Args:
            mode: Operating mode to apply.
            target: Target temperature in °C. Passed through without clamping.

        Raises:
            ThermostatApiError:
                If the device answers with a non-2xx status code.
            ThermostatTransportError:
                On connection errors or timeouts after retries.
        """
        params = {"mode": mode.wire_value, "target": float(target)}
        self._get(self.set_url, params=params)
        _LOGGER.debug("Settings applied: mode=%s target=%s", params["mode"], params["target"])

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Issue a GET request with retries on transport failures.

        Args:
            url: Full endpoint URL.
            params: Optional query parameters.

        Returns:
            The 2xx response.

        Raises:
            ThermostatApiError, ThermostatTransportError
        """
        for attempt in range(1, self.retries + 1):
            try:
                r = self.session.get(url, params=params, timeout=self.timeout_s)
            except requests.RequestException as exc:
                _LOGGER.warning(
                    "Request to %s failed (attempt %d/%d): %s",
                    url, attempt, self.retries, exc,
                )
                if attempt < self.retries:
                    time.sleep(self.retry_delay_s)
                    continue
                raise ThermostatTransportError(f"HTTP error requesting {url}: {exc}") from exc

            if not 200 <= r.status_code < 300:
                raise ThermostatApiError(r.status_code, r.reason or "")

            return r

