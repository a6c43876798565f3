"""Declarative endpoint table machinery.

An API family is a class whose attributes are `EndpointMethod` entries. Each
entry names the path, the ordered query parameters and the response shape;
accessing it on an instance yields an async method that sends the request
through the family's dispatcher.

Example:
    class ChainAPI(EndpointGroup):
        get_info = EndpointMethod(
            "/api/v5/explorer/blockchain/info",
            Param("chain_short_name"),
            response=list[BlockchainDetail],
        )

    result = await ChainAPI(dispatcher).get_info("ETH")
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from oklink_sdk._internal.dispatch.client import RequestDispatcher
from oklink_sdk._internal.dispatch.params import ParamValue
from oklink_sdk._internal.naming import to_wire_name
from oklink_sdk.result import Result


@dataclass(frozen=True)
class Param:
    """A query parameter: snake_case Python name, camelCase on the wire."""

    name: str
    required: bool = True

    @property
    def wire_name(self) -> str:
        return to_wire_name(self.name)


def optional(name: str) -> Param:
    return Param(name, required=False)


@dataclass(frozen=True)
class Endpoint:
    """One row of the endpoint table."""

    path: str
    params: tuple[Param, ...]
    response: Any = None
    doc: str | None = None

    @cached_property
    def signature(self) -> inspect.Signature:
        # Required params must precede optional ones; Signature enforces it.
        return inspect.Signature([
            inspect.Parameter(
                param.name,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                default=inspect.Parameter.empty if param.required else None,
            )
            for param in self.params
        ])

    def bind(self, *args: ParamValue, **kwargs: ParamValue) -> dict[str, ParamValue]:
        """Map call arguments to wire parameter names.

        Raises:
            TypeError: If a required argument is missing or an unknown one is given.
        """
        arguments = self.signature.bind(*args, **kwargs).arguments
        return {param.wire_name: arguments.get(param.name) for param in self.params}


class EndpointMethod:
    """Descriptor turning an `Endpoint` into a bound async method."""

    def __init__(
        self,
        path: str,
        *params: Param,
        response: Any = None,
        doc: str | None = None,
    ) -> None:
        self.endpoint = Endpoint(path, params, response, doc)
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(
        self, instance: "EndpointGroup | None", owner: type | None = None
    ) -> Any:
        if instance is None:
            return self
        return self._bind_to(instance.dispatcher)

    def _bind_to(self, dispatcher: RequestDispatcher) -> Callable[..., Awaitable[Result[Any]]]:
        endpoint = self.endpoint

        async def call(*args: ParamValue, **kwargs: ParamValue) -> Result[Any]:
            params = endpoint.bind(*args, **kwargs)
            return await dispatcher.send(endpoint.path, params, schema=endpoint.response)

        call.__name__ = call.__qualname__ = self.name
        call.__doc__ = endpoint.doc
        call.__signature__ = endpoint.signature  # type: ignore[attr-defined]
        return call


class EndpointGroup:
    """An API family: a set of endpoint methods sharing one dispatcher."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    @classmethod
    def endpoints(cls) -> dict[str, Endpoint]:
        """Return the endpoint table of this family, by method name."""
        return {
            name: attr.endpoint
            for klass in reversed(cls.__mro__)
            for name, attr in vars(klass).items()
            if isinstance(attr, EndpointMethod)
        }
