"""User-facing client for the OKLink API.

Example usage:
    from oklink_sdk import OklinkClient

    async with OklinkClient(keys=["your-access-key"]) as client:
        result = await client.blockchain.get_summary("ETH")
        summaries = result.get_or_raise()

        blocks = await client.block.get_block_list("ETH", limit=10)
"""

from collections.abc import Sequence

import httpx

from oklink_sdk._internal.dispatch.client import KeySelector, RequestDispatcher
from oklink_sdk._internal.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS
from oklink_sdk.block import BlockAPI
from oklink_sdk.blockchain import BlockchainAPI


class OklinkClient:
    """User-facing client for OKLink blockchain data APIs.

    Holds one `RequestDispatcher` shared by every API family.
    """

    def __init__(
        self,
        *,
        keys: Sequence[str] = (),
        base_url: str = DEFAULT_BASE_URL,
        key_selector: KeySelector | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
        dispatcher: RequestDispatcher | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            keys: OKLink access keys; one is chosen per request.
            base_url: The OKLink API host.
            key_selector: Strategy picking a key from the pool. Defaults to
                uniform-random choice.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional pre-configured httpx.AsyncClient.
            dispatcher: Optional ready-made dispatcher; when given, the
                other arguments are ignored and the caller owns its lifecycle.
        """
        self._owns_dispatcher = dispatcher is None
        self._dispatcher = dispatcher or RequestDispatcher(
            base_url=base_url,
            keys=keys,
            key_selector=key_selector,
            timeout_ms=timeout_ms,
            debug=debug,
            http_client=http_client,
        )
        self._blockchain = BlockchainAPI(self._dispatcher)
        self._block = BlockAPI(self._dispatcher)

    @classmethod
    def from_env(cls) -> "OklinkClient":
        """Create a client configured from environment variables.

        See `RequestDispatcher.from_env()` for the variables read.
        """
        return cls(dispatcher=RequestDispatcher.from_env())

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    @property
    def blockchain(self) -> BlockchainAPI:
        """Fundamental per-chain data."""
        return self._blockchain

    @property
    def block(self) -> BlockAPI:
        """Block and per-block transaction data."""
        return self._block

    async def aclose(self) -> None:
        """Close the dispatcher if this client created it."""
        if self._owns_dispatcher:
            await self._dispatcher.aclose()

    async def __aenter__(self) -> "OklinkClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
