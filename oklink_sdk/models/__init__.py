"""Public response models for the OKLink API.

    from oklink_sdk.models import BlockchainSummary

    summaries = result.parse()  # list[BlockchainSummary]
    summaries[0].last_height
"""

from oklink_sdk.models._base import OklinkModel, Page
from oklink_sdk.models.block import (
    BlockCountDown,
    BlockFill,
    BlockHeightByTime,
    BlockListPage,
    BlockSummary,
    BlockTransaction,
    BlockTransactionPage,
    MinedBlock,
    MinedBlockPage,
    MultiBlockTransaction,
    MultiBlockTransactionPage,
)
from oklink_sdk.models.blockchain import (
    BlockchainDetail,
    BlockchainGasFee,
    BlockchainHashrate,
    BlockchainHolders,
    BlockchainMine,
    BlockchainStatistics,
    BlockchainSummary,
    BlockchainTransaction,
    ChainRecord,
)

__all__ = [
    "OklinkModel",
    "Page",
    "ChainRecord",
    "BlockchainSummary",
    "BlockchainDetail",
    "BlockchainStatistics",
    "BlockchainHolders",
    "BlockchainGasFee",
    "BlockchainTransaction",
    "BlockchainHashrate",
    "BlockchainMine",
    "BlockSummary",
    "BlockFill",
    "BlockListPage",
    "BlockTransaction",
    "BlockTransactionPage",
    "MultiBlockTransaction",
    "MultiBlockTransactionPage",
    "BlockHeightByTime",
    "BlockCountDown",
    "MinedBlock",
    "MinedBlockPage",
]
