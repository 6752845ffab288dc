"""
Test configuration for pytest
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Generator, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

# Test environment variables (read by get_settings and bare Settings())
os.environ["ODOO_MASTER_PASSWORD"] = "test-master"
os.environ["LOG_LEVEL"] = "warning"

from odoo_signup.core.config import Settings  # noqa: E402
from odoo_signup.core.exceptions import RemoteCallError  # noqa: E402
from odoo_signup.main import create_app  # noqa: E402
from odoo_signup.services.odoo import OdooClient  # noqa: E402
from odoo_signup.services.provisioning import ProvisioningService  # noqa: E402

TEST_RPC_ID = 4242


@dataclass
class RpcCall:
    service: str
    method: str
    args: List[Any]
    rpc_id: Optional[int]


class FakeOdooServer:
    """In-memory stand-in for the Odoo JSON-RPC endpoint.

    Implements the transport interface (`call`, `close`). Databases map
    login -> (password, uid). Newly created or cloned databases reject
    `warmup_logins` logins before accepting any, or every login when
    `never_ready` is set.
    """

    def __init__(self, master_password: str, template: str, admin_user: str, admin_password: str):
        self.master_password = master_password
        self.databases: Dict[str, Dict[str, Tuple[str, int]]] = {
            template: {admin_user: (admin_password, 2)},
        }
        self.calls: List[RpcCall] = []
        self.failures: Dict[Tuple[str, str], Any] = {}
        self.failing_model_calls: set = set()
        self.warmup_logins = 0
        self.never_ready = False
        self.closed = False
        self._warming: Dict[str, int] = {}
        self._next_uid = 10

    def fail(self, service: str, method: str, error: Any = None) -> None:
        """Make every call to service.method fail.

        `error` may be an exception to raise or a response dict without a
        result; by default a typical Odoo server error is returned.
        """
        self.failures[(service, method)] = error or {
            "jsonrpc": "2.0",
            "id": TEST_RPC_ID,
            "error": {"code": 200, "message": "Odoo Server Error", "data": {"name": "odoo.exceptions.UserError"}},
        }

    def fail_model_call(self, model: str, method: str) -> None:
        """Make execute_kw fail only for model.method"""
        self.failing_model_calls.add((model, method))

    def calls_to(self, service: str, method: str) -> List[RpcCall]:
        return [c for c in self.calls if c.service == service and c.method == method]

    def call(self, service: str, method: str, args: List[Any], rpc_id: Optional[int] = None) -> Any:
        self.calls.append(RpcCall(service, method, list(args), rpc_id))

        failure = self.failures.get((service, method))
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            raise RemoteCallError(f"{service}.{method} returned no result", response=failure)

        return getattr(self, f"_{service}_{method}")(*args)

    def close(self) -> None:
        self.closed = True

    def _access_denied(self) -> RemoteCallError:
        return RemoteCallError(
            "access denied",
            response={"error": {"code": 200, "message": "Odoo Server Error", "data": {"name": "odoo.exceptions.AccessDenied"}}},
        )

    def _common_login(self, db_name, login, password):
        users = self.databases.get(db_name)
        if users is None:
            return False
        if db_name in self._warming:
            if self.never_ready or self._warming[db_name] > 0:
                self._warming[db_name] -= 1
                return False
        entry = users.get(login)
        if entry and entry[0] == password:
            return entry[1]
        return False

    def _db_create_database(self, master, db_name, demo, lang, password, login, country_code):
        if master != self.master_password:
            raise self._access_denied()
        if db_name in self.databases:
            raise RemoteCallError("exists", response={"error": {"message": f"Database {db_name} already exists"}})
        self.databases[db_name] = {login: (password, 2)}
        self._warming[db_name] = self.warmup_logins
        return True

    def _db_duplicate_database(self, master, template, db_name):
        if master != self.master_password:
            raise self._access_denied()
        if template not in self.databases or db_name in self.databases:
            raise RemoteCallError("duplicate", response={"error": {"message": "Cannot duplicate database"}})
        self.databases[db_name] = dict(self.databases[template])
        self._warming[db_name] = self.warmup_logins
        return True

    def _object_execute_kw(self, db_name, uid, password, model, method, args, kwargs=None):
        if (model, method) in self.failing_model_calls:
            raise RemoteCallError(
                f"{model}.{method} failed",
                response={"error": {"code": 200, "message": "Odoo Server Error", "data": {"name": "odoo.exceptions.ValidationError"}}},
            )
        if model == "res.users" and method == "create":
            values = args[0]
            self._next_uid += 1
            self.databases[db_name][values["login"]] = (values["password"], self._next_uid)
            return self._next_uid
        return True


class FakeClock:
    """Monotonic clock that only moves when sleep() is called"""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def rpc_id() -> int:
    """Request id the test provisioning service uses for every attempt"""
    return TEST_RPC_ID


@pytest.fixture
def settings() -> Settings:
    """Settings for a test deployment"""
    return Settings(
        _env_file=None,
        ODOO_URL="https://odoo.test",
        ODOO_MASTER_PASSWORD="test-master",
        DOMAIN="signup.test",
        ODOO_COMPANY="Acme Hosting",
        TEMPLATE_DATABASE="T",
        ADMIN_USER="admin",
        ADMIN_PASSWORD="admin-secret",
        DEFAULT_DB_MODE="clone",
        HTTP_TIMEOUT_SECONDS=9,
        POLL_INTERVAL_SECONDS=3,
        RATE_LIMIT=1000,
        BURST_LIMIT=1000,
    )


@pytest.fixture
def odoo_server(settings: Settings) -> FakeOdooServer:
    return FakeOdooServer(
        master_password=settings.ODOO_MASTER_PASSWORD,
        template=settings.TEMPLATE_DATABASE,
        admin_user=settings.ADMIN_USER,
        admin_password=settings.ADMIN_PASSWORD,
    )


@pytest.fixture
def odoo_client(settings: Settings, odoo_server: FakeOdooServer) -> OdooClient:
    return OdooClient(
        odoo_server,
        master_password=settings.ODOO_MASTER_PASSWORD,
        admin_user=settings.ADMIN_USER,
        admin_password=settings.ADMIN_PASSWORD,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(settings: Settings, odoo_client: OdooClient, fake_clock: FakeClock) -> ProvisioningService:
    return ProvisioningService(
        settings,
        odoo_client,
        clock=fake_clock,
        sleep=fake_clock.sleep,
        rpc_id_factory=lambda: TEST_RPC_ID,
    )


@pytest.fixture
def client(settings: Settings, service: ProvisioningService) -> Generator[TestClient, None, None]:
    """HTTP client for an app wired to the fake Odoo server"""
    app = create_app(settings, provisioning_service=service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def signup_payload() -> Dict[str, Any]:
    """A valid signup form submission"""
    return {
        "username": "acme",
        "email": "a@x.com",
        "password": "longenough",
        "firstName": "A",
        "lastName": "B",
        "companyName": "Acme Inc",
        "country": {"id": 1, "code": "US"},
        "terms": True,
    }
