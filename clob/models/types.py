"""Shared type definitions for order-book snapshot models.

Data providers deliver amounts either as JSON numbers or as decimal strings
(subgraph bigints). These types coerce both to Python ints and reject values
the contracts could never hold.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> int:
    """Validate that a value is a uint256 and return it as an int.

    Args:
        value: Value to validate (decimal string or int)

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return int_value


def validate_int24(value: Any) -> int:
    """Validate that a value is an int24 tick and return it as an int.

    Raises:
        ValueError: If value is not an integer in [-2^23, 2^23 - 1]
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Int24 must be string or int, got {type(value).__name__}")
    try:
        int_value = int(value)
    except ValueError as err:
        raise ValueError(f"Int24 must be a decimal integer string: '{value}'") from err
    if int_value < -(2**23) or int_value >= 2**23:
        raise ValueError(f"Int24 out of range: {value}")
    return int_value


# Ethereum address (40 hex chars after 0x prefix)
ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
_ADDRESS_RE = re.compile(ADDRESS_PATTERN)

Address = Annotated[str, Field(pattern=ADDRESS_PATTERN)]

# 256-bit unsigned integer, accepted as int or decimal string
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer"),
]

# Signed 24-bit tick, accepted as int or decimal string
Int24 = Annotated[
    int,
    BeforeValidator(validate_int24),
    Field(description="Signed 24-bit tick"),
]


def normalize_address(address: str) -> str:
    """Normalize an Ethereum address to lowercase with a 0x prefix."""
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: Any) -> bool:
    """Check for a 0x-prefixed, 40-hex-digit address in any letter case."""
    return isinstance(address, str) and _ADDRESS_RE.fullmatch(address) is not None
