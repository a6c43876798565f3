"""Request dispatch for OKLink API calls.

WARNING: This is an internal module backing the API families.
Prefer `oklink_sdk.OklinkClient` in application code.
"""

from oklink_sdk._internal.dispatch.client import (
    KeySelector,
    RequestDispatcher,
    get_request_dispatcher,
    random_key,
)
from oklink_sdk._internal.dispatch.params import build_query
from oklink_sdk._internal.dispatch.redaction import redact_headers

__all__ = [
    "KeySelector",
    "RequestDispatcher",
    "get_request_dispatcher",
    "random_key",
    "build_query",
    "redact_headers",
]
