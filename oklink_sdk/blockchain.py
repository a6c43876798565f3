"""Fundamental blockchain data endpoints.

https://www.oklink.com/docs/en/#fundamental-blockchain-data-fundamental-data
"""

from oklink_sdk._internal.endpoints import EndpointGroup, EndpointMethod, Param, optional
from oklink_sdk.models.blockchain import (
    BlockchainDetail,
    BlockchainGasFee,
    BlockchainHashrate,
    BlockchainHolders,
    BlockchainMine,
    BlockchainStatistics,
    BlockchainSummary,
    BlockchainTransaction,
)

_CHAIN = Param("chain_short_name")


class BlockchainAPI(EndpointGroup):
    """Per-chain summary, statistics, fee and mining data.

    Example:
        result = await client.blockchain.get_info("ETH")
        if result.is_ok():
            detail = result.parse()[0]
    """

    get_summary = EndpointMethod(
        "/api/v5/explorer/blockchain/summary",
        optional("chain_short_name"),
        response=list[BlockchainSummary],
        doc="Summary of every supported chain, or of one chain (e.g. 'ETH').",
    )
    get_info = EndpointMethod(
        "/api/v5/explorer/blockchain/info",
        _CHAIN,
        response=list[BlockchainDetail],
        doc="Details of a chain currently supported by OKLink.",
    )
    get_block = EndpointMethod(
        "/api/v5/explorer/blockchain/block",
        _CHAIN,
        response=list[BlockchainStatistics],
        doc="Block statistics of a chain.",
    )
    get_address = EndpointMethod(
        "/api/v5/explorer/blockchain/address",
        _CHAIN,
        response=list[BlockchainHolders],
        doc="Holder address statistics of a chain.",
    )
    get_gas_fee = EndpointMethod(
        "/api/v5/explorer/blockchain/fee",
        _CHAIN,
        response=list[BlockchainGasFee],
        doc="Transaction and gas fee levels of a chain.",
    )
    get_transaction = EndpointMethod(
        "/api/v5/explorer/blockchain/transaction",
        _CHAIN,
        response=list[BlockchainTransaction],
        doc="Transaction statistics of a chain.",
    )
    get_hashrate = EndpointMethod(
        "/api/v5/explorer/blockchain/hashes",
        _CHAIN,
        response=list[BlockchainHashrate],
        doc="Network computing power of a chain.",
    )
    get_mine = EndpointMethod(
        "/api/v5/explorer/blockchain/mine",
        _CHAIN,
        response=list[BlockchainMine],
        doc="Mining revenue of a chain.",
    )
