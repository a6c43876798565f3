"""OKLink SDK for Python.

Async client for the OKLink blockchain data REST API.

Public API:
    OklinkClient - User-facing client (client.blockchain, client.block)
    Result - Response envelope returned by every endpoint method
    exceptions - OklinkError and its subclasses

Internal (not for direct use):
    _internal.dispatch - Request dispatch
    _internal.endpoints - Endpoint table machinery
"""

from oklink_sdk._version import __version__
from oklink_sdk.block import BlockAPI
from oklink_sdk.blockchain import BlockchainAPI
from oklink_sdk.client import OklinkClient
from oklink_sdk.exceptions import (
    OklinkAPIError,
    OklinkConfigError,
    OklinkError,
    OklinkTransportError,
    OklinkValidationError,
)
from oklink_sdk.result import Result, validate_payload

__all__ = [
    "__version__",
    "OklinkClient",
    "BlockchainAPI",
    "BlockAPI",
    "Result",
    "validate_payload",
    "OklinkError",
    "OklinkAPIError",
    "OklinkConfigError",
    "OklinkTransportError",
    "OklinkValidationError",
]
