"""
Tests for Odoo admin operations and model calls
"""

import pytest

from odoo_signup.core.exceptions import (
    AuthenticationFailed,
    ObjectCallError,
    ProvisioningFailed,
    RemoteCallError,
    TransportError,
)
from odoo_signup.services.odoo import DatabaseProbe, OdooClient


class StubTransport:
    """Answers every call with a fixed result or exception"""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def call(self, service, method, args, rpc_id=None):
        self.calls.append((service, method, args, rpc_id))
        if self.error is not None:
            raise self.error
        return self.result

    def close(self):
        pass


def make_client(transport) -> OdooClient:
    return OdooClient(transport, master_password="m", admin_user="admin", admin_password="admin-pw")


class TestLogin:
    def test_returns_uid(self):
        transport = StubTransport(result=7)
        assert make_client(transport).login("acme", "a@x.com", "secret", rpc_id=3) == 7
        assert transport.calls == [("common", "login", ["acme", "a@x.com", "secret"], 3)]

    def test_float_uid_is_accepted(self):
        assert make_client(StubTransport(result=7.0)).login("acme", "u", "p") == 7

    @pytest.mark.parametrize("result", [False, True, 0, -1, None, "2"])
    def test_no_positive_uid_fails(self, result):
        with pytest.raises(AuthenticationFailed):
            make_client(StubTransport(result=result)).login("acme", "u", "p")

    def test_remote_error_becomes_authentication_failure(self):
        response = {"error": {"message": "database does not exist"}}
        transport = StubTransport(error=RemoteCallError(response=response))

        with pytest.raises(AuthenticationFailed) as exc_info:
            make_client(transport).login("missing", "u", "p")

        assert exc_info.value.response == response

    def test_transport_error_propagates(self):
        with pytest.raises(TransportError):
            make_client(StubTransport(error=TransportError("refused"))).login("acme", "u", "p")


class TestDatabaseExists:
    def test_exists_when_admin_login_works(self, odoo_client, odoo_server):
        odoo_server.databases["acme"] = {"admin": ("admin-secret", 2)}

        assert odoo_client.database_exists("acme") is DatabaseProbe.EXISTS
        call = odoo_server.calls[0]
        assert (call.service, call.method, call.args) == ("common", "login", ["acme", "admin", "admin-secret"])

    def test_missing_and_rejected_look_the_same(self, odoo_client, odoo_server):
        odoo_server.databases["rejects"] = {"someone-else": ("pw", 2)}

        missing = odoo_client.database_exists("missing")
        rejected = odoo_client.database_exists("rejects")

        assert missing is DatabaseProbe.NOT_FOUND_OR_UNREACHABLE
        assert rejected is missing

    def test_unreachable_server(self, odoo_client, odoo_server):
        odoo_server.fail("common", "login", TransportError("connection refused"))
        assert odoo_client.database_exists("acme") is DatabaseProbe.NOT_FOUND_OR_UNREACHABLE

    def test_remote_error(self, odoo_client, odoo_server):
        odoo_server.fail("common", "login")
        assert odoo_client.database_exists("acme") is DatabaseProbe.NOT_FOUND_OR_UNREACHABLE


class TestCreateDatabase:
    def test_sends_master_password_and_initial_user(self):
        transport = StubTransport(result=True)
        make_client(transport).create_database("acme", "secret", "a@x.com", "US", rpc_id=9)

        assert transport.calls == [
            ("db", "create_database", ["m", "acme", False, "en_US", "secret", "a@x.com", "US"], 9)
        ]

    @pytest.mark.parametrize("result", [False, None, 1, "true"])
    def test_anything_but_true_fails(self, result):
        with pytest.raises(ProvisioningFailed) as exc_info:
            make_client(StubTransport(result=result)).create_database("acme", "secret", "a@x.com", "US")

        assert exc_info.value.response == {"result": result}

    def test_remote_error_keeps_response(self):
        response = {"error": {"message": "Access Denied"}}

        with pytest.raises(ProvisioningFailed) as exc_info:
            make_client(StubTransport(error=RemoteCallError(response=response))).create_database(
                "acme", "secret", "a@x.com", "US"
            )

        assert exc_info.value.response == response

    def test_transport_error_propagates(self):
        with pytest.raises(TransportError):
            make_client(StubTransport(error=TransportError())).create_database("acme", "secret", "a@x.com", "US")


class TestDuplicateDatabase:
    def test_sends_template_and_new_name(self):
        transport = StubTransport(result=True)
        make_client(transport).duplicate_database("T", "acme", rpc_id=4)

        assert transport.calls == [("db", "duplicate_database", ["m", "T", "acme"], 4)]

    def test_false_fails(self):
        with pytest.raises(ProvisioningFailed):
            make_client(StubTransport(result=False)).duplicate_database("T", "acme")


class TestExecuteKw:
    def test_positional_only(self):
        transport = StubTransport(result=True)
        result = make_client(transport).execute_kw(
            "acme", 2, "pw", "res.company", "write", [[1], {"name": "Acme"}], rpc_id=5
        )

        assert result is True
        assert transport.calls == [
            ("object", "execute_kw", ["acme", 2, "pw", "res.company", "write", [[1], {"name": "Acme"}]], 5)
        ]

    def test_keyword_arguments_are_appended(self):
        transport = StubTransport(result=[{"id": 1}])
        make_client(transport).execute_kw(
            "acme", 2, "pw", "res.partner", "search_read", [[]], {"fields": ["name"], "limit": 1}
        )

        args = transport.calls[0][2]
        assert len(args) == 7
        assert args[6] == {"fields": ["name"], "limit": 1}

    def test_returns_model_result(self):
        assert make_client(StubTransport(result=42)).execute_kw("acme", 2, "pw", "res.users", "create", [{}]) == 42

    def test_remote_error_becomes_object_call_error(self):
        response = {"error": {"message": "ValidationError"}}

        with pytest.raises(ObjectCallError) as exc_info:
            make_client(StubTransport(error=RemoteCallError(response=response))).execute_kw(
                "acme", 2, "pw", "res.users", "create", [{}]
            )

        assert exc_info.value.response == response
