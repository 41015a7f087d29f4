"""Signers managed by a JSON-RPC node (``eth_accounts``)."""

import itertools
from typing import Any, Optional

import httpx

from ..errors import SignerProviderError
from .base import ADDRESS_PATTERN, Signer, SignerProvider

DEFAULT_TIMEOUT_SECONDS = 10.0

_request_ids = itertools.count(1)


class RemoteNodeSigners(SignerProvider):
    """Asks the network's node for the accounts it has unlocked."""

    def __init__(
        self,
        network: str,
        url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(network)
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def get_signers(self) -> list[Signer]:
        result = await self._call("eth_accounts", [])

        if not isinstance(result, list) or not all(
            isinstance(address, str) and ADDRESS_PATTERN.match(address) for address in result
        ):
            raise SignerProviderError(
                "Node returned a malformed account list",
                network=self.network,
                provider=self.kind,
                context={"url": self.url},
            )

        self.logger.debug("Remote signers fetched", url=self.url, count=len(result))
        return [Signer(address=address) for address in result]

    async def _call(self, method: str, params: list[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(_request_ids),
            "method": method,
            "params": params,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPError as e:
            raise SignerProviderError(
                f"RPC request {method} to {self.url} failed: {e}",
                network=self.network,
                provider=self.kind,
            ) from e
        except ValueError as e:
            raise SignerProviderError(
                f"RPC response from {self.url} is not JSON",
                network=self.network,
                provider=self.kind,
            ) from e

        if not isinstance(body, dict):
            raise SignerProviderError(
                f"RPC response from {self.url} is not a JSON-RPC object",
                network=self.network,
                provider=self.kind,
            )

        if body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise SignerProviderError(
                f"RPC error from {self.url}: {message}",
                network=self.network,
                provider=self.kind,
                context={"method": method, "error": error},
            )

        return body.get("result")
