"""Version constants and validators shared by the configuration schemas.

Enum fields use the domain value objects directly (``(str, Enum)``), so
JSON strings validate straight into domain values.
"""

# Supported schema versions for project files
# Version 1.0: Screen, rigging, power, routes and multi-cable sections
# Version 1.1: Added infrastructure (PDU, video) and custom catalog modules
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


def validate_quantities(value: dict[float, int], field_name: str) -> dict[float, int]:
    """Check a length -> quantity mapping used for truss and cable selections.

    Raises:
        ValueError: If a length is not positive or a quantity is negative.
    """
    for length, qty in value.items():
        if length <= 0:
            raise ValueError(f"{field_name} lengths must be positive, got {length}")
        if qty < 0:
            raise ValueError(f"{field_name} quantities must be non-negative, got {qty}")
    return value
