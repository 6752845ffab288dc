"""
Schemas module
"""

from odoo_signup.schemas.signup import (
    Country,
    HealthResponse,
    ProvisioningMode,
    SignupData,
    SignupRequest,
    SignupResponse,
)

__all__ = [
    "Country",
    "HealthResponse",
    "ProvisioningMode",
    "SignupData",
    "SignupRequest",
    "SignupResponse",
]
