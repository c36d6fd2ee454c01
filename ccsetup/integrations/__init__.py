"""Remote API integrations for CCSETUP.

This package contains:
- probe: Connectivity check against the Messages API
- errors: APIError hierarchy for failed checks
"""

from ccsetup.integrations.errors import (
    APIConnectionError,
    APIError,
    APIPermissionError,
    AuthError,
    EndpointError,
)
from ccsetup.integrations.probe import ProbeResult, probe

__all__ = [
    "APIError",
    "APIConnectionError",
    "AuthError",
    "APIPermissionError",
    "EndpointError",
    "ProbeResult",
    "probe",
]
