# =============================================================================
# thermoctl Library – Exceptions Module
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


class ThermostatError(Exception):
    """
    Base exception for the library.

    All custom exceptions of the thermoctl library inherit from this class so
    that callers can catch `ThermostatError` to handle any library-specific
    failure in a generic way.
    """
    pass


class ThermostatEmptyResponseError(ThermostatError):
    """
    The thermostat answered with a success status code but without a body
    that can be turned into a status record (empty payload or JSON `null`).
    """

    def __init__(self, message: str = "Empty response from server") -> None:
        super().__init__(message)


class ThermostatApiError(ThermostatError):
    """
    The thermostat HTTP API answered with a non-2xx status code.

    Attributes:
        code: Numeric HTTP status code (e.g. 503).
        message: HTTP reason phrase (e.g. "Service Unavailable"), possibly empty.
    """

    def __init__(self, code: int, message: str = "") -> None:
        self.code = int(code)
        self.message = message or ""
        super().__init__(f"{self.code} {self.message}".rstrip())


class ThermostatTransportError(ThermostatError):
    """
    Errors related to the transport layer.

    This includes problems such as:
      - Network unreachable / connection refused
      - Request timeouts
      - Any other `requests` failure after the configured retries
    """
    pass


class ThermostatProtocolError(ThermostatTransportError):
    """
    The response body could not be decoded into a thermostat status.

    Raised when:
      - The body is not valid JSON
      - The JSON record lacks the numeric temperature fields

    A decode failure is reported the same way as a transport failure, hence
    the subclassing.
    """
    pass
