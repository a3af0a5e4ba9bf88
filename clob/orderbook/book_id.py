"""Book id derivation.

A book is identified on-chain by the hash of its key: the currencies, the
unit size, both fee policies and the hooks contract. The id is the low 192
bits of keccak256 over the ABI-encoded key.
"""

from __future__ import annotations

from dataclasses import dataclass

from clob.constants import ZERO_ADDRESS
from clob.fees import FeePolicy
from clob.models import normalize_address

BOOK_ID_MASK = (1 << 192) - 1

# abi.encode(address base, uint64 unit, address quote, uint24 makerPolicy,
#            address hooks, uint24 takerPolicy)
BOOK_KEY_TYPES = ["address", "uint64", "address", "uint24", "address", "uint24"]


@dataclass(frozen=True)
class BookKey:
    """The fields hashed into a book id."""

    base: str
    unit_size: int
    quote: str
    maker_policy: FeePolicy
    taker_policy: FeePolicy
    hooks: str = ZERO_ADDRESS


def to_book_id(key: BookKey) -> int:
    """Compute the 192-bit id of a book key.

    Args:
        key: Book key

    Returns:
        keccak256(abi.encode(key)) masked to 192 bits
    """
    from eth_abi import encode  # type: ignore[attr-defined]
    from eth_utils import keccak

    base_bytes = bytes.fromhex(normalize_address(key.base)[2:])
    quote_bytes = bytes.fromhex(normalize_address(key.quote)[2:])
    hooks_bytes = bytes.fromhex(normalize_address(key.hooks)[2:])

    encoded = encode(
        BOOK_KEY_TYPES,
        [
            base_bytes,
            key.unit_size,
            quote_bytes,
            key.maker_policy.value,
            hooks_bytes,
            key.taker_policy.value,
        ],
    )
    return int.from_bytes(keccak(encoded), "big") & BOOK_ID_MASK


__all__ = ["BOOK_ID_MASK", "BookKey", "to_book_id"]
