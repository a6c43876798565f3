"""Base model for OKLink response records."""

from pydantic import BaseModel, ConfigDict

from oklink_sdk._internal.naming import to_wire_name


class OklinkModel(BaseModel):
    """Response record with snake_case fields read from camelCase JSON.

    Unknown fields are kept so new upstream attributes are not lost.
    """

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        extra="allow",
    )


class Page(OklinkModel):
    """Pagination fields shared by list responses."""

    page: str | None = None
    limit: str | None = None
    total_page: str | None = None
