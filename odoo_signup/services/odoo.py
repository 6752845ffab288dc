"""
Odoo Database Service
Database lifecycle and model calls against an Odoo server over JSON-RPC
"""

from enum import Enum
from typing import Any, Dict, List, Optional

import structlog

from odoo_signup.core.config import Settings
from odoo_signup.core.exceptions import (
    AuthenticationFailed,
    ObjectCallError,
    ProvisioningFailed,
    RemoteCallError,
    RemoteError,
)
from odoo_signup.services.jsonrpc import JsonRpcTransport

logger = structlog.get_logger(__name__)

DEFAULT_LANG = "en_US"


class DatabaseProbe(str, Enum):
    """Outcome of the login-based existence probe.

    A failed login cannot tell a missing database from rejected
    credentials, so the negative case keeps both meanings in its name.
    """
    EXISTS = "exists"
    NOT_FOUND_OR_UNREACHABLE = "not_found_or_unreachable"


def _is_uid(result: Any) -> bool:
    # bool is an int subclass; a `False` login result must not pass
    return isinstance(result, (int, float)) and not isinstance(result, bool) and result > 0


class OdooClient:
    """Odoo admin operations and generic model calls"""

    def __init__(
        self,
        transport: JsonRpcTransport,
        master_password: str,
        admin_user: str,
        admin_password: str,
    ):
        """
        Initialize Odoo client

        Args:
            transport: JSON-RPC transport bound to the Odoo base URL
            master_password: Database manager password (create/duplicate)
            admin_user: Administrative login used to probe databases
            admin_password: Password for admin_user
        """
        self.transport = transport
        self.master_password = master_password
        self.admin_user = admin_user
        self.admin_password = admin_password

    @classmethod
    def from_settings(cls, settings: Settings) -> "OdooClient":
        transport = JsonRpcTransport(
            settings.ODOO_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            verify=settings.ODOO_VERIFY_SSL,
        )
        return cls(
            transport,
            master_password=settings.ODOO_MASTER_PASSWORD,
            admin_user=settings.ADMIN_USER,
            admin_password=settings.ADMIN_PASSWORD,
        )

    def close(self) -> None:
        self.transport.close()

    def login(
        self,
        db_name: str,
        username: str,
        password: str,
        rpc_id: Optional[int] = None,
    ) -> int:
        """
        Log in to a database and return the user id

        Args:
            db_name: Database to log in to
            username: User login
            password: User password
            rpc_id: JSON-RPC request id

        Returns:
            Positive uid

        Raises:
            AuthenticationFailed: no positive uid (bad credentials, missing
                or still-initializing database)
            TransportError: the server could not be reached
        """
        log = logger.bind(database=db_name, username=username)
        log.info("Logging in to get UID")

        try:
            result = self.transport.call("common", "login", [db_name, username, password], rpc_id)
        except RemoteCallError as e:
            log.error("Login failed - remote error", response=e.response)
            raise AuthenticationFailed(response=e.response) from e

        if _is_uid(result):
            log.info("Login successful", uid=int(result))
            return int(result)

        log.error("Login failed - no valid UID")
        raise AuthenticationFailed()

    def database_exists(self, db_name: str) -> DatabaseProbe:
        """
        Check whether a database exists by logging in as the admin user

        Never raises: any failure is reported as NOT_FOUND_OR_UNREACHABLE.
        """
        log = logger.bind(database=db_name)
        log.info("Checking if database exists by attempting login")

        try:
            self.login(db_name, self.admin_user, self.admin_password)
        except RemoteError as e:
            log.debug("Database does not exist or login failed", error=str(e))
            return DatabaseProbe.NOT_FOUND_OR_UNREACHABLE

        log.info("Database exists - login successful")
        return DatabaseProbe.EXISTS

    def create_database(
        self,
        db_name: str,
        password: str,
        login: str,
        country_code: str,
        rpc_id: Optional[int] = None,
    ) -> None:
        """
        Create an empty database with an initial admin user

        Args:
            db_name: New database name
            password: Password for the initial admin user
            login: Login of the initial admin user
            country_code: Two-letter ISO country code
            rpc_id: JSON-RPC request id

        Raises:
            ProvisioningFailed: the server did not answer `true`
            TransportError: the server could not be reached
        """
        log = logger.bind(database=db_name, login=login)
        log.info("Creating new Odoo database using JSON-RPC")

        args = [self.master_password, db_name, False, DEFAULT_LANG, password, login, country_code]
        self._expect_true("create_database", args, rpc_id, log)

        log.info("Database created successfully")

    def duplicate_database(
        self,
        template_db_name: str,
        new_db_name: str,
        rpc_id: Optional[int] = None,
    ) -> None:
        """
        Clone an existing database under a new name

        Raises:
            ProvisioningFailed: the server did not answer `true`
            TransportError: the server could not be reached
        """
        log = logger.bind(template_database=template_db_name, new_database=new_db_name)
        log.info("Cloning Odoo database using JSON-RPC")

        args = [self.master_password, template_db_name, new_db_name]
        self._expect_true("duplicate_database", args, rpc_id, log)

        log.info("Database cloned successfully")

    def execute_kw(
        self,
        db_name: str,
        uid: int,
        password: str,
        model: str,
        method: str,
        args: List[Any],
        kwargs: Optional[Dict[str, Any]] = None,
        rpc_id: Optional[int] = None,
    ) -> Any:
        """
        Call `model.method(*args, **kwargs)` as the given user

        Args:
            db_name: Database name
            uid: User id from login()
            password: Password of that user
            model: Model name, e.g. "res.company"
            method: Model method, e.g. "write"
            args: Positional arguments of the model method
            kwargs: Keyword arguments of the model method
            rpc_id: JSON-RPC request id

        Returns:
            Whatever the model method returned

        Raises:
            ObjectCallError: the server reported an error
            TransportError: the server could not be reached
        """
        log = logger.bind(database=db_name, model=model, method=method)
        log.info("Executing kw method")

        call_args = [db_name, uid, password, model, method, args]
        if kwargs is not None:
            call_args.append(kwargs)

        try:
            result = self.transport.call("object", "execute_kw", call_args, rpc_id)
        except RemoteCallError as e:
            log.error("Execute_kw failed", response=e.response)
            raise ObjectCallError(f"{model}.{method} failed", response=e.response) from e

        log.info("Execute_kw successful")
        return result

    def _expect_true(self, method: str, args: List[Any], rpc_id: Optional[int], log) -> None:
        try:
            result = self.transport.call("db", method, args, rpc_id)
        except RemoteCallError as e:
            log.error(f"{method} returned an error", response=e.response)
            raise ProvisioningFailed(f"{method} failed", response=e.response) from e

        if result is not True:
            log.error(f"{method} response indicates failure", result=result)
            raise ProvisioningFailed(f"{method} failed", response={"result": result})
