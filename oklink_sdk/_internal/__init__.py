"""Internal modules for OKLink SDK.

WARNING: These modules back the public client and API families.
They are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch (query building, key selection, transport)
    endpoints - Declarative endpoint table machinery
    http - Shared HTTP client configuration
    naming - Python-to-wire name conversion
"""
