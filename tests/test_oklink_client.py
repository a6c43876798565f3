"""Tests for OklinkClient."""

import os
from unittest.mock import patch

import httpx
import pytest
import respx

import oklink_sdk
from oklink_sdk import BlockAPI, BlockchainAPI, OklinkClient
from oklink_sdk._internal.dispatch.client import RequestDispatcher
from oklink_sdk.exceptions import OklinkAPIError

BASE = "https://www.oklink.com"


class TestOklinkClientInit:
    """Tests for OklinkClient construction."""

    @pytest.mark.asyncio
    async def test_families_share_dispatcher(self):
        """Every API family should use the client's dispatcher."""
        async with OklinkClient(keys=["k1", "k2"]) as client:
            assert isinstance(client.blockchain, BlockchainAPI)
            assert isinstance(client.block, BlockAPI)
            assert client.blockchain.dispatcher is client.dispatcher
            assert client.block.dispatcher is client.dispatcher
            assert client.dispatcher.keys == ("k1", "k2")

    @pytest.mark.asyncio
    async def test_accepts_dispatcher(self):
        """Should use a ready-made dispatcher as-is."""
        async with RequestDispatcher(keys=["k"]) as dispatcher:
            client = OklinkClient(dispatcher=dispatcher)
            assert client.dispatcher is dispatcher

    @pytest.mark.asyncio
    async def test_from_env(self):
        """Should configure the dispatcher from environment variables."""
        env = {"OKLINK_ACCESS_KEYS": "a,b", "OKLINK_BASE_URL": "http://localhost:8080"}
        with patch.dict(os.environ, env, clear=True):
            client = OklinkClient.from_env()
        async with client:
            assert client.dispatcher.keys == ("a", "b")
            assert client.dispatcher.base_url == "http://localhost:8080"


class TestOklinkClientLifecycle:
    """Tests for dispatcher ownership."""

    @pytest.mark.asyncio
    async def test_closes_owned_dispatcher(self):
        """Should close the dispatcher it created."""
        client = OklinkClient()
        await client.aclose()
        assert client.dispatcher._client.is_closed

    @pytest.mark.asyncio
    async def test_from_env_owns_dispatcher(self):
        """Should close the dispatcher built from environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            client = OklinkClient.from_env()
        await client.aclose()
        assert client.dispatcher._client.is_closed

    @pytest.mark.asyncio
    async def test_leaves_injected_dispatcher_open(self):
        """Should not close a caller-supplied dispatcher on aclose()."""
        dispatcher = RequestDispatcher()
        client = OklinkClient(dispatcher=dispatcher)
        await client.aclose()
        assert not dispatcher._client.is_closed
        await dispatcher.aclose()

    @pytest.mark.asyncio
    @respx.mock
    async def test_injected_dispatcher_survives_context_exit(self):
        """Should leave a shared dispatcher usable after the client's block exits."""
        route = respx.get(f"{BASE}/x").mock(
            return_value=httpx.Response(200, json={"code": "0", "msg": "", "data": []})
        )

        async with RequestDispatcher() as dispatcher:
            async with OklinkClient(dispatcher=dispatcher):
                pass
            assert not dispatcher._client.is_closed
            await dispatcher.send("/x")

        assert route.call_count == 1
        assert dispatcher._client.is_closed


class TestOklinkClientEndToEnd:
    """End-to-end tests through the public client."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_flow(self):
        """Should send the key and return the payload."""
        route = respx.get(f"{BASE}/api/v5/explorer/blockchain/info").mock(
            return_value=httpx.Response(
                200,
                json={
                    "code": "0",
                    "msg": "",
                    "data": [{"chainFullName": "Ethereum", "chainShortName": "ETH"}],
                },
            )
        )

        async with OklinkClient(keys=["my-key"]) as client:
            result = await client.blockchain.get_info(chain_short_name="ETH")

        request = route.calls.last.request
        assert request.headers["ok-access-key"] == "my-key"
        assert request.headers["user-agent"] == f"oklink-sdk/{oklink_sdk.__version__}"
        assert result.get_or_raise()[0]["chainShortName"] == "ETH"
        assert result.parse()[0].chain_short_name == "ETH"

    @pytest.mark.asyncio
    @respx.mock
    async def test_domain_failure_flow(self):
        """Should surface an upstream failure code through get_or_raise()."""
        respx.get(f"{BASE}/api/v5/explorer/block/block-fills").mock(
            return_value=httpx.Response(
                200, json={"code": "50000", "msg": "Body can not be empty.", "data": []}
            )
        )

        async with OklinkClient() as client:
            result = await client.block.get_block_fills("ETH", 1)

        assert result.is_ok() is False
        assert result.msg == "Body can not be empty."
        with pytest.raises(OklinkAPIError, match="Body can not be empty."):
            result.get_or_raise()

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self):
        """Should close the owned HTTP client on exit."""
        async with OklinkClient() as client:
            pass
        assert client.dispatcher._client.is_closed


def test_public_exports():
    """The package should expose the public API at top level."""
    for name in oklink_sdk.__all__:
        assert hasattr(oklink_sdk, name)
