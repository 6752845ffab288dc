"""
JSON-RPC transport for the Odoo external API

Sends `{"jsonrpc": "2.0", "method": "call", "params": {...}, "id": n}` to
`<base_url>/jsonrpc` and hands back the `result` field of the reply.
"""

import json
import time
from typing import Any, Dict, List, Optional

import httpx
import structlog

from odoo_signup.core.exceptions import RemoteCallError, TransportError

logger = structlog.get_logger(__name__)

JSONRPC_PATH = "/jsonrpc"


def new_rpc_id() -> int:
    """Request id for one signup attempt; uniqueness is not required"""
    return time.time_ns() % 1_000_000


def build_envelope(service: str, method: str, args: List[Any], rpc_id: int) -> Dict[str, Any]:
    """Build the `call` envelope for a service/method pair"""
    return {
        "jsonrpc": "2.0",
        "method": "call",
        "params": {
            "service": service,
            "method": method,
            "args": args,
        },
        "id": rpc_id,
    }


class JsonRpcTransport:
    """Blocking JSON-RPC client bound to one Odoo base URL"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 300.0,
        verify: bool = False,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the transport

        Args:
            base_url: Odoo server URL, e.g. "https://odoo.internal:8069"
            timeout: Per-request timeout in seconds
            verify: Validate TLS certificates. Off by default because the
                Odoo host is expected to sit on a trusted internal network.
            client: Pre-built httpx client (tests pass one with a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        if client is None:
            if not verify:
                logger.warning(
                    "TLS certificate verification disabled for Odoo transport",
                    base_url=self.base_url,
                )
            client = httpx.Client(base_url=self.base_url, timeout=timeout, verify=verify)
        self._client = client

    def call(
        self,
        service: str,
        method: str,
        args: List[Any],
        rpc_id: Optional[int] = None,
    ) -> Any:
        """
        Invoke `service.method(*args)` on the server

        Returns:
            The `result` field of the reply

        Raises:
            TransportError: serialization, connection or parse failure
            RemoteCallError: the reply carries no `result` (remote error)
        """
        if rpc_id is None:
            rpc_id = new_rpc_id()

        envelope = build_envelope(service, method, args, rpc_id)
        try:
            body = json.dumps(envelope)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Failed to serialize {service}.{method} payload: {e}") from e

        try:
            resp = self._client.post(
                JSONRPC_PATH,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{service}.{method} request failed: {e}") from e

        try:
            response = resp.json()
        except ValueError as e:
            raise TransportError(f"Failed to parse {service}.{method} response: {e}") from e

        if not isinstance(response, dict):
            raise TransportError(f"Malformed {service}.{method} response: expected a JSON object")

        if "result" not in response:
            raise RemoteCallError(f"{service}.{method} returned no result", response=response)

        return response["result"]

    def close(self) -> None:
        self._client.close()
