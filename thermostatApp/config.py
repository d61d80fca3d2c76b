# =============================================================================
# thermostatApp – Deployment configuration
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

import os
from typing import Optional

from thermoctl import ThermostatClient


# ---------------------------------------------------------------------------
# Deployment values. Each one can be overridden through the environment.
# ---------------------------------------------------------------------------

BASE_URL = os.environ.get("THERMOSTAT_BASE_URL", "http://192.168.1.125")

# Per-request timeout of the HTTP transport (seconds).
TIMEOUT_S = float(os.environ.get("THERMOSTAT_TIMEOUT_S", "30"))

# Attempts per request on connection errors/timeouts, and the pause between them.
RETRIES = int(os.environ.get("THERMOSTAT_RETRIES", "1"))
RETRY_DELAY_S = float(os.environ.get("THERMOSTAT_RETRY_DELAY_S", "1.0"))

POLL_INTERVAL_S = float(os.environ.get("THERMOSTAT_POLL_INTERVAL_S", "30"))


def build_client(base_url: Optional[str] = None) -> ThermostatClient:
    """
    Create the HTTP transport from the values above.

    Args:
        base_url: Optional override of BASE_URL.
    """
    return ThermostatClient(
        base_url=base_url or BASE_URL,
        timeout_s=TIMEOUT_S,
        retries=RETRIES,
        retry_delay_s=RETRY_DELAY_S,
    )
