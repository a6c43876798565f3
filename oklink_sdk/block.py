"""Block data endpoints.

https://www.oklink.com/docs/en/#fundamental-blockchain-data-block-data
"""

from oklink_sdk._internal.endpoints import EndpointGroup, EndpointMethod, Param, optional
from oklink_sdk.models.block import (
    BlockCountDown,
    BlockFill,
    BlockHeightByTime,
    BlockListPage,
    BlockTransactionPage,
    MinedBlockPage,
    MultiBlockTransactionPage,
)

_CHAIN = Param("chain_short_name")


class BlockAPI(EndpointGroup):
    """Block details, block lists and per-block transactions.

    ``protocol_type`` selects the transaction kind: ``transaction``,
    ``internal``, ``token_20``, ``token_721`` or ``token_1155``.
    """

    get_block_fills = EndpointMethod(
        "/api/v5/explorer/block/block-fills",
        _CHAIN,
        Param("height"),
        response=list[BlockFill],
        doc="Details of the block at the given height.",
    )
    get_block_list = EndpointMethod(
        "/api/v5/explorer/block/block-list",
        _CHAIN,
        optional("height"),
        optional("limit"),
        optional("page"),
        response=list[BlockListPage],
        doc="Latest blocks of a chain, paginated.",
    )
    get_transaction_list = EndpointMethod(
        "/api/v5/explorer/block/transaction-list",
        _CHAIN,
        Param("height"),
        optional("protocol_type"),
        optional("limit"),
        optional("page"),
        response=list[BlockTransactionPage],
        doc="Transactions in the block at the given height, paginated.",
    )
    get_transaction_list_multi = EndpointMethod(
        "/api/v5/explorer/block/transaction-list-multi",
        _CHAIN,
        Param("start_block_height"),
        Param("end_block_height"),
        optional("protocol_type"),
        optional("limit"),
        optional("page"),
        response=list[MultiBlockTransactionPage],
        doc="Transactions across a range of blocks, paginated.",
    )
    get_block_height_by_time = EndpointMethod(
        "/api/v5/explorer/block/block-height-by-time",
        _CHAIN,
        Param("time"),
        optional("closest"),
        response=list[BlockHeightByTime],
        doc="Block closest to a Unix millisecond timestamp; closest is 'before' or 'after'.",
    )
    get_block_count_down = EndpointMethod(
        "/api/v5/explorer/block/block-count-down",
        _CHAIN,
        Param("count_down_block_height"),
        response=list[BlockCountDown],
        doc="Estimated time until a future block height.",
    )
    get_mined_block_list = EndpointMethod(
        "/api/v5/explorer/block/mined-block-list",
        _CHAIN,
        Param("address"),
        optional("limit"),
        optional("page"),
        response=list[MinedBlockPage],
        doc="Blocks produced by a miner address, paginated.",
    )
