"""Pydantic models for OKLink fundamental blockchain data.

See https://www.oklink.com/docs/en/#fundamental-blockchain-data-fundamental-data
"""

from oklink_sdk.models._base import OklinkModel

# =============================================================================
# Shared Fields
# =============================================================================


class ChainRecord(OklinkModel):
    """Fields present on every per-chain record."""

    chain_full_name: str
    chain_short_name: str
    symbol: str | None = None


# =============================================================================
# Fundamental Data
# =============================================================================


class BlockchainSummary(ChainRecord):
    """Summary of a supported chain."""

    last_height: str | None = None
    last_block_time: str | None = None
    circulating_supply: str | None = None
    circulating_supply_proportion: str | None = None
    transactions: str | None = None


class BlockchainDetail(ChainRecord):
    """Details of a supported chain."""

    rank: str | None = None
    mineable: bool | None = None
    algorithm: str | None = None
    consensus: str | None = None
    diff_estimation: str | None = None
    current_diff: str | None = None
    diff_adjust_time: str | None = None
    circulating_supply: str | None = None
    total_supply: str | None = None
    tps: str | None = None
    last_height: str | None = None
    last_block_time: str | None = None
    issue_date: str | None = None


class BlockchainStatistics(ChainRecord):
    """Block statistics of a chain. Times are Unix milliseconds."""

    last_height: str | None = None
    first_exchange_historical_time: str | None = None
    first_block_time: str | None = None
    first_block_height: str | None = None
    avg_block_interval: str | None = None
    avg_block_size24h: str | None = None
    avg_block_size24h_percent: str | None = None
    media_block_size: str | None = None
    halve_time: str | None = None


class BlockchainHolders(ChainRecord):
    """Address statistics of a chain."""

    valid_address_count: str | None = None
    new_address_count24h: str | None = None
    total_addresses: str | None = None
    new_total_addresses24h: str | None = None
    contract_addresses: str | None = None
    new_contract_addresses24h: str | None = None
    external_addresses: str | None = None
    new_external_addresses24h: str | None = None
    active_addresses: str | None = None
    new_active_addresses: str | None = None


class BlockchainGasFee(ChainRecord):
    """Transaction and gas fee levels of a chain."""

    best_transaction_fee: str | None = None
    best_transaction_fee_sat: str | None = None
    recommended_gas_price: str | None = None
    rapid_gas_price: str | None = None
    standard_gas_price: str | None = None
    slow_gas_price: str | None = None
    base_fee: str | None = None
    gas_used_ratio: str | None = None


class BlockchainTransaction(ChainRecord):
    """Transaction statistics of a chain."""

    pending_transaction_count: str | None = None
    transaction_value24h: str | None = None
    total_transaction_count: str | None = None
    tran_rate: str | None = None
    avg_transaction_count24h: str | None = None
    avg_transaction_count24h_percent: str | None = None
    pending_transaction_size: str | None = None


class BlockchainHashrate(ChainRecord):
    """Network computing power of a chain.

    ``hash_rate_change24h`` is a ratio: 0.02 is a 2% increase, -0.02 a 2% decline.
    """

    hash_rate: str | None = None
    hash_rate_change24h: str | None = None


class BlockchainMine(ChainRecord):
    """Mining revenue of a chain."""

    avg_mine_reward24h: str | None = None
    miner_income_per_unit: str | None = None
    miner_income_per_unit_coin: str | None = None
