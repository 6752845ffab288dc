"""
Tenant provisioning workflows

Create mode: create an empty database with the requester as its admin, wait
until it accepts the requester's login, then fill in the company record.

Clone mode: duplicate the template database, wait until it accepts the
template's admin login, create the requester as an admin user, then fill in
the company record.

Nothing is persisted locally. A failure aborts the attempt and leaves any
half-provisioned database on the Odoo server for an operator to handle.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog

from odoo_signup.core.config import Settings
from odoo_signup.core.exceptions import (
    ConflictError,
    ProvisioningError,
    ProvisioningStage,
    ReadinessTimeoutError,
    RemoteError,
    SignupValidationError,
)
from odoo_signup.schemas.signup import ProvisioningMode, SignupRequest
from odoo_signup.services.jsonrpc import new_rpc_id
from odoo_signup.services.odoo import DatabaseProbe, OdooClient
from odoo_signup.services.readiness import TimedOut, wait_until_ready

logger = structlog.get_logger(__name__)

RESERVED_USERNAMES = frozenset({"admin", "www"})

# The main company of a fresh or cloned database
DEFAULT_COMPANY_ID = 1
# Admin group memberships granted to the requester in a cloned database
ADMIN_GROUP_IDS = [1, 2, 4]


def sanitize_username(username: str) -> str:
    """Database name for a requested username"""
    return username.strip().lower()


@dataclass(frozen=True)
class ProvisioningOutcome:
    """Result of a successful provisioning attempt"""
    message: str
    instance_url: str
    email: str
    database: str


class ProvisioningService:
    """Runs one signup end to end against the Odoo server"""

    def __init__(
        self,
        settings: Settings,
        client: OdooClient,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        rpc_id_factory: Callable[[], int] = new_rpc_id,
    ):
        self.settings = settings
        self.client = client
        self.clock = clock
        self.sleep = sleep
        self.rpc_id_factory = rpc_id_factory

    def resolve_mode(
        self,
        requested: Optional[ProvisioningMode],
        request: SignupRequest,
    ) -> ProvisioningMode:
        """Query parameter wins over the body field, which wins over config"""
        return requested or request.db_mode or ProvisioningMode(self.settings.DEFAULT_DB_MODE)

    def check_username(self, username: str) -> str:
        db_name = sanitize_username(username)
        if db_name in RESERVED_USERNAMES:
            raise SignupValidationError("Username not allowed")
        return db_name

    def provision(self, request: SignupRequest, mode: ProvisioningMode) -> ProvisioningOutcome:
        """
        Provision a tenant database for a signup request

        Raises:
            SignupValidationError: reserved username
            ConflictError: a database with that name already answers logins
            ProvisioningError: a remote step failed; `stage` says which
        """
        db_name = self.check_username(request.username)

        log = logger.bind(
            username=db_name,
            email=request.email,
            database=db_name,
            mode=mode.value,
        )
        log.info("Processing signup request")

        started = self.clock()
        rpc_id = self.rpc_id_factory()

        if self.client.database_exists(db_name) is DatabaseProbe.EXISTS:
            log.info("Username already taken")
            raise ConflictError()

        if mode is ProvisioningMode.CREATE:
            self._provision_created(request, db_name, rpc_id, started, log)
        else:
            self._provision_cloned(request, db_name, rpc_id, started, log)

        instance_url = self.settings.instance_url(db_name)
        log.info(
            "Signup completed successfully",
            instance_url=instance_url,
            elapsed_seconds=self.clock() - started,
        )
        return ProvisioningOutcome(
            message=f"Signup successful using {mode.value} mode! Your Odoo instance is ready.",
            instance_url=instance_url,
            email=request.email,
            database=db_name,
        )

    def _provision_created(self, request: SignupRequest, db_name: str, rpc_id: int, started: float, log) -> None:
        log.info("Creating new database")
        try:
            self.client.create_database(
                db_name,
                request.password,
                request.email,
                request.country.code,
                rpc_id=rpc_id,
            )
        except RemoteError as e:
            raise self._failed(ProvisioningStage.CREATE_DATABASE, db_name, e, started, log) from e

        # The requester is the initial admin of a created database
        uid = self._wait_until_ready(
            ProvisioningStage.CREATE_READINESS,
            db_name,
            request.email,
            request.password,
            rpc_id,
            started,
            log,
        )

        try:
            self.client.execute_kw(
                db_name,
                uid,
                request.password,
                "res.company",
                "write",
                [[DEFAULT_COMPANY_ID], self._company_values(request)],
                rpc_id=rpc_id,
            )
        except RemoteError as e:
            raise self._failed(ProvisioningStage.CREATE_COMPANY_UPDATE, db_name, e, started, log) from e

        log.info("Company details updated successfully")

    def _provision_cloned(self, request: SignupRequest, db_name: str, rpc_id: int, started: float, log) -> None:
        settings = self.settings

        log.info("Cloning database from template", template_database=settings.TEMPLATE_DATABASE)
        try:
            self.client.duplicate_database(settings.TEMPLATE_DATABASE, db_name, rpc_id=rpc_id)
        except RemoteError as e:
            raise self._failed(ProvisioningStage.CLONE_DATABASE, db_name, e, started, log) from e

        # A clone keeps the template's admin account until the new user exists
        uid = self._wait_until_ready(
            ProvisioningStage.CLONE_READINESS,
            db_name,
            settings.ADMIN_USER,
            settings.ADMIN_PASSWORD,
            rpc_id,
            started,
            log,
        )

        user_values = {
            "name": request.full_name,
            "login": request.email,
            "password": request.password,
            "email": request.email,
            "active": True,
            "company_id": DEFAULT_COMPANY_ID,
            "groups_id": [[6, 0, list(ADMIN_GROUP_IDS)]],
        }
        try:
            self.client.execute_kw(
                db_name,
                uid,
                settings.ADMIN_PASSWORD,
                "res.users",
                "create",
                [user_values],
                rpc_id=rpc_id,
            )
        except RemoteError as e:
            raise self._failed(ProvisioningStage.CLONE_USER_CREATE, db_name, e, started, log) from e

        log.info("New user created successfully")

        company_values = self._company_values(request)
        if request.country.id > 0:
            company_values["country_id"] = request.country.id

        try:
            self.client.execute_kw(
                db_name,
                uid,
                settings.ADMIN_PASSWORD,
                "res.company",
                "write",
                [[DEFAULT_COMPANY_ID], company_values],
                rpc_id=rpc_id,
            )
        except RemoteError as e:
            raise self._failed(ProvisioningStage.CLONE_COMPANY_UPDATE, db_name, e, started, log) from e

        log.info("Company details updated successfully")

    def _wait_until_ready(
        self,
        stage: ProvisioningStage,
        db_name: str,
        login: str,
        password: str,
        rpc_id: int,
        started: float,
        log,
    ) -> int:
        outcome = wait_until_ready(
            lambda: self.client.login(db_name, login, password, rpc_id=rpc_id),
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            interval=self.settings.POLL_INTERVAL_SECONDS,
            clock=self.clock,
            sleep=self.sleep,
            log=log,
        )
        if isinstance(outcome, TimedOut):
            error = ReadinessTimeoutError(stage, db_name)
            self._log_failure(error, started, log, attempts=outcome.attempts)
            raise error
        return outcome.uid

    def _failed(
        self,
        stage: ProvisioningStage,
        db_name: str,
        cause: RemoteError,
        started: float,
        log,
    ) -> ProvisioningError:
        error = ProvisioningError(stage, db_name)
        self._log_failure(error, started, log, error_detail=str(cause), response=cause.response)
        return error

    def _log_failure(self, error: ProvisioningError, started: float, log, **context: Any) -> None:
        log.error(
            error.message,
            stage=error.stage.value,
            elapsed_seconds=self.clock() - started,
            **context,
        )
        if error.partial:
            log.warning(
                "Partial provisioning left on server",
                stage=error.stage.value,
            )

    @staticmethod
    def _company_values(request: SignupRequest) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "name": request.company_name,
            "email": request.email,
        }
        if request.phone:
            values["phone"] = request.phone
        return values
