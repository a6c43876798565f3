"""Query-string marshaling for OKLink requests."""

from collections.abc import Mapping

ParamValue = str | int | float | bool | None


def build_query(params: Mapping[str, ParamValue] | None) -> dict[str, str]:
    """Serialize request parameters into query-string values.

    Parameters whose value is None are omitted entirely. Booleans are sent
    as ``true``/``false``; numbers use their ``str()`` form. Insertion order
    is preserved.

    Args:
        params: Mapping of wire parameter name to value.

    Returns:
        A new dictionary of string values ready for URL encoding.

    Raises:
        TypeError: If a value is not a string, number, bool or None.
    """
    query: dict[str, str] = {}
    for name, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[name] = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            query[name] = str(value)
        else:
            raise TypeError(
                f"Unsupported value for query parameter {name!r}: {type(value).__name__}"
            )
    return query
