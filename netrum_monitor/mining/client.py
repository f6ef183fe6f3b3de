"""Client for the Netrum mining API."""

from typing import Any, Self

import httpx

from netrum_monitor.helpers.config import get_api_base_url, get_request_timeout
from netrum_monitor.helpers.constants import CLAIM_PATH, LIVE_LOG_PATH
from netrum_monitor.helpers.http import create_http_client, post_json
from netrum_monitor.helpers.logging import get_logger
from netrum_monitor.mining.models import (
    ClaimResponse,
    LiveLogResponse,
    NodeAddressRequest,
)


logger = get_logger(__name__)


class MiningClient:
    """Thin async wrapper over the live-log and claim endpoints.

    The underlying httpx client is either passed in (tests, shared pools) or
    created on demand; only a client created here is closed by aclose().
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = get_api_base_url(base_url)
        self._owns_client = http_client is None
        self.http_client = http_client or create_http_client(
            timeout=timeout if timeout is not None else get_request_timeout(),
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def _post(self, path: str, address: str) -> dict[str, Any]:
        """POST the node address; a reply that is not a JSON object reads as {}."""
        url = f"{self.base_url}{path}"
        body = NodeAddressRequest(node_address=address).model_dump(by_alias=True)
        data = await post_json(self.http_client, url, body)
        if not isinstance(data, dict):
            logger.warning("Non-object reply from %s: %r", url, data)
            return {}
        return data

    async def fetch_live_info(self, address: str) -> LiveLogResponse:
        """Fetch the live mining snapshot for a node address.

        Args:
            address: Node EVM address

        Returns:
            LiveLogResponse: Parsed reply, including upstream errors
        """
        data = await self._post(LIVE_LOG_PATH, address)
        return LiveLogResponse.model_validate(data)

    async def fetch_claim(self, address: str) -> ClaimResponse:
        """Fetch the claim status (cumulative mined tokens) for a node address."""
        data = await self._post(CLAIM_PATH, address)
        logger.debug("Claim sample for %s: %s", address, data.get("claimData"))
        return ClaimResponse.model_validate(data)


__all__ = ["MiningClient"]
