"""Pydantic models for OKLink block data.

See https://www.oklink.com/docs/en/#fundamental-blockchain-data-block-data
"""

from pydantic import Field

from oklink_sdk.models._base import OklinkModel, Page

# =============================================================================
# Block Records
# =============================================================================


class BlockSummary(OklinkModel):
    """One block in a block list."""

    hash: str | None = None
    height: str
    validator: str | None = None
    block_time: str | None = None
    txn_count: str | None = None
    block_size: str | None = None
    mine_reward: str | None = None
    total_fee: str | None = None
    fee_symbol: str | None = None
    ommer_block: str | None = None
    gas_used: str | None = None
    gas_limit: str | None = None
    gas_avg_price: str | None = None
    state: str | None = None
    burnt: str | None = None
    net_work: str | None = None
    txn_internal: str | None = None


class BlockFill(BlockSummary):
    """Full details of a single block."""

    chain_full_name: str
    chain_short_name: str
    amount: str | None = None
    merkle_root_hash: str | None = None
    miner: str | None = None
    # Spelled this way by the API.
    difficuity: str | None = None
    nonce: str | None = None
    tips: str | None = None
    confirm: str | None = None
    base_fee_per_gas: str | None = None


class MinedBlock(OklinkModel):
    """A block produced by a given miner address."""

    height: str
    block_hash: str | None = None
    block_time: str | None = None
    txn_count: str | None = None
    block_size: str | None = None
    mine_reward: str | None = None
    total_fee: str | None = None
    fee_symbol: str | None = None


class BlockHeightByTime(OklinkModel):
    """Block closest to a given timestamp."""

    height: str
    block_time: str | None = None


class BlockCountDown(OklinkModel):
    """Estimate of when a future block height will be reached."""

    current_height: str | None = None
    count_down_block_height: str
    estimated_end_time: str | None = None
    remaining_blocks: str | None = None


# =============================================================================
# Transaction Records
# =============================================================================


class _Transfer(OklinkModel):
    from_address: str | None = Field(default=None, alias="from")
    to_address: str | None = Field(default=None, alias="to")
    is_from_contract: bool | None = None
    is_to_contract: bool | None = None
    amount: str | None = None
    transaction_symbol: str | None = None
    state: str | None = None
    token_id: str | None = None
    token_contract_address: str | None = None


class BlockTransaction(_Transfer):
    """A transaction within a single block."""

    txid: str
    method_id: str | None = None
    block_hash: str | None = None
    height: str | None = None
    transaction_time: str | None = None
    txfee: str | None = None
    challenge_status: str | None = None
    l1_origin_hash: str | None = None


class MultiBlockTransaction(_Transfer):
    """A transaction from a block range."""

    tx_id: str
    method_id: str | None = None
    block_hash: str | None = None
    height: str | None = None
    transaction_time: str | None = None
    tx_fee: str | None = None


# =============================================================================
# Paginated Responses
# =============================================================================


class BlockListPage(Page):
    """Page of the latest blocks of a chain."""

    chain_full_name: str | None = None
    chain_short_name: str | None = None
    block_list: list[BlockSummary] = []


class BlockTransactionPage(Page):
    """Page of transactions in one block.

    The API names the list ``blockList`` even though it holds transactions.
    """

    chain_full_name: str | None = None
    chain_short_name: str | None = None
    block_list: list[BlockTransaction] = []


class MultiBlockTransactionPage(Page):
    """Page of transactions across a block range."""

    transaction_list: list[MultiBlockTransaction] = []


class MinedBlockPage(Page):
    """Page of blocks produced by one miner address."""

    chain_full_name: str | None = None
    chain_short_name: str | None = None
    block_list: list[MinedBlock] = []
