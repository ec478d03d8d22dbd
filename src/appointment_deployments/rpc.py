"""JSON-RPC client for appointment-deployments library."""

import itertools
import logging
from typing import Any, List, Optional

import requests

from .constants import RPC_TIMEOUT
from .exceptions import RPCError

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """Minimal Ethereum JSON-RPC 2.0 client over HTTP for read calls."""

    def __init__(self, rpc_url: str, timeout: int = RPC_TIMEOUT):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._ids = itertools.count(1)
        self._session = requests.Session()

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name, e.g. "eth_accounts"
            params: Positional parameters

        Returns:
            The "result" member of the response

        Raises:
            RPCError: On network errors, non-200 responses or RPC error objects
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }
        logger.debug("RPC -> %s %s", method, payload["params"])

        try:
            response = self._session.post(self.rpc_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise RPCError(f"Network error during RPC call {method}: {e}") from e

        # Check for HTTP errors
        if response.status_code != 200:
            raise RPCError(
                f"RPC request {method} failed with status {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise RPCError(f"Invalid JSON in RPC response to {method}") from e

        # Check for RPC errors
        if "error" in result:
            error = result["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise RPCError(f"RPC error from {method}: {message}")

        logger.debug("RPC <- %s %s", method, result.get("result"))
        return result.get("result")

    def accounts(self) -> List[str]:
        """Accounts the node can sign for."""
        return self.call("eth_accounts")
