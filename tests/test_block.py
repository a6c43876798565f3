"""Tests for BlockAPI."""

import httpx
import pytest
import respx

from oklink_sdk._internal.dispatch.client import RequestDispatcher
from oklink_sdk.block import BlockAPI
from oklink_sdk.models import (
    BlockFill,
    BlockHeightByTime,
    BlockListPage,
    MultiBlockTransactionPage,
)

BASE = "https://www.oklink.com"
PREFIX = f"{BASE}/api/v5/explorer/block"


def ok(data):
    return httpx.Response(200, json={"code": "0", "msg": "", "data": data})


class TestBlockRequests:
    """Tests for query marshaling of block endpoints."""

    @pytest.mark.parametrize(
        ("method", "args", "kwargs", "path", "query"),
        [
            ("get_block_fills", ("ETH", 735732), {}, "/block-fills", "chainShortName=ETH&height=735732"),
            ("get_block_list", ("ETH", None, 10, 1), {}, "/block-list", "chainShortName=ETH&limit=10&page=1"),
            (
                "get_transaction_list",
                ("ETH", 18126560, "transaction", 1),
                {},
                "/transaction-list",
                "chainShortName=ETH&height=18126560&protocolType=transaction&limit=1",
            ),
            (
                "get_transaction_list_multi",
                ("ETH", 18809970, 18809972),
                {"protocol_type": "transaction", "limit": 1},
                "/transaction-list-multi",
                "chainShortName=ETH&startBlockHeight=18809970&endBlockHeight=18809972"
                "&protocolType=transaction&limit=1",
            ),
            (
                "get_block_height_by_time",
                ("ETH", 1702366480000),
                {},
                "/block-height-by-time",
                "chainShortName=ETH&time=1702366480000",
            ),
            (
                "get_block_count_down",
                ("ETH",),
                {"count_down_block_height": 41064934},
                "/block-count-down",
                "chainShortName=ETH&countDownBlockHeight=41064934",
            ),
            (
                "get_mined_block_list",
                ("ETH", "0x4838b106fce9647bdf1e7877bf73ce8b0bad5f97"),
                {},
                "/mined-block-list",
                "chainShortName=ETH&address=0x4838b106fce9647bdf1e7877bf73ce8b0bad5f97",
            ),
        ],
    )
    @pytest.mark.asyncio
    @respx.mock
    async def test_method_query(self, method, args, kwargs, path, query):
        """Each method should GET its path with wire-named, non-None params."""
        route = respx.get(f"{PREFIX}{path}").mock(return_value=ok([]))

        async with RequestDispatcher() as dispatcher:
            await getattr(BlockAPI(dispatcher), method)(*args, **kwargs)

        assert route.calls.last.request.url.query.decode() == query

    def test_table_size(self):
        """The block family should declare seven endpoints."""
        assert len(BlockAPI.endpoints()) == 7


class TestBlockResponses:
    """Tests for parsing block responses."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_block_fills(self):
        """Should parse a block's details."""
        respx.get(f"{PREFIX}/block-fills").mock(
            return_value=ok([
                {
                    "chainFullName": "Ethereum",
                    "chainShortName": "ETH",
                    "hash": "0x545f02750b8fffe8354140b8ec2414fd72fa34a5ca93c58fe25f94c07ebb44ff",
                    "height": "735732",
                    "validator": "NanoPool",
                    "blockTime": "1450873643000",
                    "txnCount": "4",
                    "mineReward": "5.012841864",
                    "merkleRootHash": "0xcfb7cc8bc5f11bb9c3e05a9fec1a17b63b0899a75624038a762ce800bda588b3",
                    "difficuity": "8518354788907",
                    "baseFeePerGas": "",
                }
            ])
        )

        async with RequestDispatcher() as dispatcher:
            result = await BlockAPI(dispatcher).get_block_fills("ETH", 735732)

        (block,) = result.parse()
        assert isinstance(block, BlockFill)
        assert block.height == "735732"
        assert block.validator == "NanoPool"
        assert block.difficuity == "8518354788907"
        assert block.base_fee_per_gas == ""

    @pytest.mark.asyncio
    @respx.mock
    async def test_block_list_page(self):
        """Should parse pagination and the nested block list."""
        respx.get(f"{PREFIX}/block-list").mock(
            return_value=ok([
                {
                    "page": "1",
                    "limit": "2",
                    "totalPage": "10000",
                    "chainFullName": "Ethereum",
                    "chainShortName": "ETH",
                    "blockList": [{"height": "2"}, {"height": "1"}],
                }
            ])
        )

        async with RequestDispatcher() as dispatcher:
            result = await BlockAPI(dispatcher).get_block_list("ETH", limit=2)

        (page,) = result.parse()
        assert isinstance(page, BlockListPage)
        assert page.total_page == "10000"
        assert [block.height for block in page.block_list] == ["2", "1"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_multi_block_transactions(self):
        """Should map from/to onto from_address/to_address."""
        respx.get(f"{PREFIX}/transaction-list-multi").mock(
            return_value=ok([
                {
                    "page": "1",
                    "limit": "1",
                    "totalPage": "1",
                    "transactionList": [
                        {
                            "height": "18809972",
                            "txId": "0xb86c039478b97be1e4de569ffa227dd57c0aeb793955328d7d17674f9ec0cee1",
                            "from": "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5",
                            "to": "0x5c8d0eed35a9e632bb8c0abe4662b6ab3326850b",
                            "isFromContract": False,
                            "isToContract": False,
                            "amount": "0.150851832900380503",
                            "txFee": "0.000926296864164",
                            "state": "success",
                        }
                    ],
                }
            ])
        )

        async with RequestDispatcher() as dispatcher:
            result = await BlockAPI(dispatcher).get_transaction_list_multi("ETH", 18809970, 18809972)

        (page,) = result.parse()
        assert isinstance(page, MultiBlockTransactionPage)
        tx = page.transaction_list[0]
        assert tx.from_address == "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5"
        assert tx.to_address == "0x5c8d0eed35a9e632bb8c0abe4662b6ab3326850b"
        assert tx.tx_fee == "0.000926296864164"
        assert tx.is_from_contract is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_block_height_by_time(self):
        """Should parse the height lookup."""
        respx.get(f"{PREFIX}/block-height-by-time").mock(
            return_value=ok([{"height": "18768649", "blockTime": "1702366475000"}])
        )

        async with RequestDispatcher() as dispatcher:
            result = await BlockAPI(dispatcher).get_block_height_by_time(
                "ETH", 1702366480000, closest="before"
            )

        assert result.parse() == [BlockHeightByTime(height="18768649", block_time="1702366475000")]
