"""Python-to-wire name conversion."""


def to_wire_name(name: str) -> str:
    """Convert a snake_case Python name to the camelCase name OKLink uses.

    Digits are kept as-is, so ``hashrate_change24h`` maps to
    ``hashrateChange24h`` rather than ``hashrateChange24H``.
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
