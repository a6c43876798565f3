"""Response envelope for OKLink API calls.

Every OKLink endpoint answers with the same body shape::

    {"code": "0", "msg": "", "data": [...]}

``code`` "0" means success; any other value is a service-defined failure
(e.g. "50000" body can not be empty, "50001" service temporarily
unavailable). See https://www.oklink.com/docs/en/#support-errors-and-api-status
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from oklink_sdk.exceptions import (
    OklinkAPIError,
    OklinkConfigError,
    OklinkTransportError,
    OklinkValidationError,
)

T = TypeVar("T")

SUCCESS_CODE = "0"


def validate_payload(data: Any, schema: Any) -> bool:
    """Check whether a payload conforms to a schema.

    Args:
        data: The decoded payload.
        schema: Any type pydantic can validate against, e.g. a model class
            or ``list[Model]``.

    Returns:
        True if the payload validates, False otherwise.
    """
    try:
        TypeAdapter(schema).validate_python(data)
    except ValidationError:
        return False
    return True


class Result(Generic[T]):
    """Success/failure/payload wrapper around a decoded API response.

    ``code`` and ``msg`` are kept exactly as the API sent them. The envelope
    is immutable; an optional validation schema is fixed at construction.
    """

    __slots__ = ("_code", "_msg", "_data", "_schema")

    def __init__(self, code: str, msg: str, data: T, *, schema: Any = None) -> None:
        """Initialize the envelope.

        Args:
            code: Status code from the response body.
            msg: Diagnostic message from the response body.
            data: Payload from the response body.
            schema: Optional declared shape of ``data`` used by
                ``is_valid()`` and ``parse()``.
        """
        self._code = code
        self._msg = msg
        self._data = data
        self._schema = schema

    @classmethod
    def from_response(cls, body: Any, *, schema: Any = None) -> "Result[Any]":
        """Create an envelope from a decoded response body.

        Args:
            body: The decoded JSON body.
            schema: Optional declared shape of the payload.

        Returns:
            A new Result wrapping the body.

        Raises:
            OklinkTransportError: If the body is not an envelope object.
        """
        if not isinstance(body, Mapping) or "code" not in body or "msg" not in body:
            raise OklinkTransportError(
                f"Malformed response envelope: expected object with code and msg, "
                f"got {type(body).__name__}"
            )
        return cls(body["code"], body["msg"], body.get("data"), schema=schema)

    @property
    def code(self) -> str:
        return self._code

    @property
    def msg(self) -> str:
        return self._msg

    @property
    def data(self) -> T:
        return self._data

    @property
    def schema(self) -> Any:
        return self._schema

    def is_ok(self) -> bool:
        """Return True if the response code is "0"."""
        return self._code == SUCCESS_CODE

    def get_or_raise(self) -> T:
        """Return the payload, or raise if the response is a failure.

        Returns:
            The payload, unchanged.

        Raises:
            OklinkAPIError: If ``is_ok()`` is False. The message is ``msg``.
        """
        if not self.is_ok():
            raise OklinkAPIError(self._msg, code=self._code)
        return self._data

    def is_valid(self) -> bool | None:
        """Validate the payload against the schema.

        Returns:
            True or False when a schema is set, None when there is nothing
            to check against.
        """
        if self._schema is None:
            return None
        return validate_payload(self._data, self._schema)

    def parse(self) -> Any:
        """Return the payload converted into the schema's Python types.

        Raises:
            OklinkConfigError: If the envelope has no schema.
            OklinkValidationError: If the payload does not match the schema.
        """
        if self._schema is None:
            raise OklinkConfigError("Result has no schema to parse the payload with")
        try:
            return TypeAdapter(self._schema).validate_python(self._data)
        except ValidationError as e:
            raise OklinkValidationError(str(e)) from e

    def __repr__(self) -> str:
        return f"Result(code={self._code!r}, msg={self._msg!r}, data={self._data!r})"
