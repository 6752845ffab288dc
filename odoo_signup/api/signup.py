"""
Signup API endpoints
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
import structlog

from odoo_signup.core.rate_limit import enforce_rate_limit
from odoo_signup.schemas.signup import (
    HealthResponse,
    ProvisioningMode,
    SignupData,
    SignupRequest,
    SignupResponse,
)
from odoo_signup.services.provisioning import ProvisioningService

logger = structlog.get_logger(__name__)
router = APIRouter(dependencies=[Depends(enforce_rate_limit)])


def get_provisioning_service(request: Request) -> ProvisioningService:
    """Provisioning service built at startup"""
    return request.app.state.provisioning_service


@router.post("/signup", response_model=SignupResponse, response_model_exclude_none=True)
def signup(
    payload: SignupRequest,
    db_mode: Optional[ProvisioningMode] = Query(default=None),
    service: ProvisioningService = Depends(get_provisioning_service),
):
    """Provision a new Odoo instance for the requester.

    Runs in the threadpool and blocks until the database is ready or the
    polling budget is spent; failures are rendered by the SignupError
    handler registered in main.
    """
    mode = service.resolve_mode(db_mode, payload)
    outcome = service.provision(payload, mode)

    return SignupResponse(
        success=True,
        message=outcome.message,
        data=SignupData(
            instance_url=outcome.instance_url,
            email=outcome.email,
            database=outcome.database,
        ),
    )


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))
