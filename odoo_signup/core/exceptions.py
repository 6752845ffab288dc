"""
Signup error hierarchy

Every error carries the HTTP status it is reported with. Remote-layer errors
(transport, RPC, object calls) are never shown to the client as-is; the
provisioning service translates them into a stage-specific ProvisioningError.
"""

from enum import Enum
from typing import Any, Dict, Optional


class SignupError(Exception):
    """Base class for all signup errors"""

    status_code: int = 500
    default_message: str = "Signup failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SignupValidationError(SignupError):
    """Request is well-formed JSON but violates a signup rule"""

    status_code = 400
    default_message = "Validation failed"


class ConflictError(SignupError):
    """Derived database name is already taken"""

    status_code = 409
    default_message = "Username already taken"


class RateLimitExceeded(SignupError):
    """Token bucket in front of the API is empty"""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


# Remote layer


class RemoteError(SignupError):
    """Base class for failures talking to the Odoo server"""

    def __init__(self, message: Optional[str] = None, response: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.response = response


class TransportError(RemoteError):
    """Envelope could not be sent or the reply could not be parsed"""

    default_message = "JSON-RPC transport failure"


class RemoteCallError(RemoteError):
    """Reply has no `result` field; `response` holds the remote error"""

    default_message = "JSON-RPC call returned no result"


class AuthenticationFailed(RemoteError):
    """Login returned no usable uid (bad credentials or database not ready)"""

    default_message = "Login failed"


class ProvisioningFailed(RemoteError):
    """create_database / duplicate_database did not return True"""

    default_message = "Database provisioning call failed"


class ObjectCallError(RemoteError):
    """execute_kw returned no result"""

    default_message = "execute_kw failed"


# Orchestration


class ProvisioningStage(str, Enum):
    """Steps of a provisioning attempt that can fail"""
    CREATE_DATABASE = "create_database"
    CLONE_DATABASE = "clone_database"
    CREATE_READINESS = "create_readiness"
    CLONE_READINESS = "clone_readiness"
    CREATE_COMPANY_UPDATE = "create_company_update"
    CLONE_USER_CREATE = "clone_user_create"
    CLONE_COMPANY_UPDATE = "clone_company_update"


STAGE_MESSAGES = {
    ProvisioningStage.CREATE_DATABASE: "Failed to create database",
    ProvisioningStage.CLONE_DATABASE: "Failed to clone database",
    ProvisioningStage.CREATE_READINESS: "Database creation timeout",
    ProvisioningStage.CLONE_READINESS: "Database cloning timeout",
    ProvisioningStage.CREATE_COMPANY_UPDATE: "Database created but company update failed",
    ProvisioningStage.CLONE_USER_CREATE: "Database cloned but user creation failed",
    ProvisioningStage.CLONE_COMPANY_UPDATE: "Database cloned and user created but company update failed",
}

# Stages reached after the remote database was requested
PARTIAL_STAGES = frozenset({
    ProvisioningStage.CREATE_READINESS,
    ProvisioningStage.CLONE_READINESS,
    ProvisioningStage.CREATE_COMPANY_UPDATE,
    ProvisioningStage.CLONE_USER_CREATE,
    ProvisioningStage.CLONE_COMPANY_UPDATE,
})


class ProvisioningError(SignupError):
    """A provisioning step failed; the message names the stage"""

    status_code = 500

    def __init__(self, stage: ProvisioningStage, database: str):
        super().__init__(STAGE_MESSAGES[stage])
        self.stage = stage
        self.database = database

    @property
    def partial(self) -> bool:
        """True when the remote database may exist in a half-provisioned state"""
        return self.stage in PARTIAL_STAGES


class ReadinessTimeoutError(ProvisioningError):
    """Database never accepted a login within the polling budget"""
