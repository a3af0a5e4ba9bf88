"""Per-chain currency configuration.

Quote-currency resolution and unit sizing depend on which tokens a chain
treats as stablecoins and which token wraps the native currency. Addresses
are stored lowercase and compared after normalization.
"""

from __future__ import annotations

import os
from enum import IntEnum

from clob.constants import ZERO_ADDRESS
from clob.errors import UnknownChain
from clob.models.types import normalize_address


class ChainId(IntEnum):
    """Chains with deployed order-book contracts."""

    CLOBER_TESTNET = 7777
    ARBITRUM_SEPOLIA = 421614
    BASE = 8453
    BERACHAIN_MAINNET = 80094
    BERACHAIN_TESTNET = 80084
    MITOSIS_TESTNET = 124832
    MONAD_TESTNET = 10143
    SONIC_MAINNET = 146
    ZKSYNC_ERA = 324
    RISE_SEPOLIA = 11155931


# Environment variable naming the chain used when a caller passes no chain id
DEFAULT_CHAIN_ID_ENV = "CLOB_DEFAULT_CHAIN_ID"

# Stablecoins preferred as the quote currency of a market
STABLECOINS: dict[ChainId, tuple[str, ...]] = {
    ChainId.CLOBER_TESTNET: ("0x00bfd44e79fb7f6dd5887a9426c8ef85a0cd23e0",),
    ChainId.ARBITRUM_SEPOLIA: ("0x00bfd44e79fb7f6dd5887a9426c8ef85a0cd23e0",),
    ChainId.BASE: (
        "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",  # USDC
        "0xd9aaec86b65d86f6a7b5b1b0c42ffa531710b6ca",  # USDbC
        "0x50c5725949a6f0c72e6c4a641f24049a917db0cb",  # DAI
    ),
    ChainId.BERACHAIN_MAINNET: (
        "0xfcbd14dc51f0a4d49d5e53c2e0950e0bc26d0dce",
        "0x5d3a1ff2b6bab83b63cd9ad0787074081a52ef34",
        "0x549943e04f40284185054145c6e4e9568c1d3241",
        "0x779ded0c9e1022225f8e0630b35a9b54be713736",
    ),
    ChainId.BERACHAIN_TESTNET: (),
    ChainId.MITOSIS_TESTNET: (),
    ChainId.MONAD_TESTNET: (
        "0x43d614b1ba4ba469faeaa4557aeafdec039b8795",
        "0xf817257fed379853cde0fa4f97ab987181b1e5ea",
        "0x88b8e2161dedc77ef4ab7585569d2415a1c1055d",
    ),
    ChainId.SONIC_MAINNET: ("0x29219dd400f2bf60e5a23d13be72b486d4038894",),  # USDC
    ChainId.ZKSYNC_ERA: (),
    ChainId.RISE_SEPOLIA: (
        "0xa985e387ddf21b87c1fe8a0025d827674040221e",
        "0x40918ba7f132e0acba2ce4de4c4baf9bd2d7d849",
        "0x8a93d247134d91e0de6f96547cb0204e5be8e5d8",
    ),
}

# Wrapped native currency per chain; chains without one are absent
WRAPPED_NATIVE: dict[ChainId, str] = {
    ChainId.CLOBER_TESTNET: "0xf2e615a933825de4b39b497f6e6991418fb31b78",
    ChainId.ARBITRUM_SEPOLIA: "0xf2e615a933825de4b39b497f6e6991418fb31b78",
    ChainId.BASE: "0x4200000000000000000000000000000000000006",
    ChainId.BERACHAIN_MAINNET: "0x6969696969696969696969696969696969696969",
    ChainId.MONAD_TESTNET: "0x760afe86e5de5fa0ee542fc7b7b713e1c5425701",
    ChainId.SONIC_MAINNET: "0x039e2fb66102314ce7b64ce5ce3e5183bc94ad38",  # wS
    ChainId.RISE_SEPOLIA: "0x4200000000000000000000000000000000000006",
}


def resolve_chain(chain_id: int | None) -> ChainId:
    """Resolve a chain id, falling back to the configured default for None.

    Raises:
        UnknownChain: If the id is not a known chain
    """
    if chain_id is None:
        return get_default_chain_id()
    try:
        return ChainId(chain_id)
    except ValueError as e:
        raise UnknownChain(f"unknown chain id: {chain_id}") from e


def get_default_chain_id() -> ChainId:
    """Chain selected by CLOB_DEFAULT_CHAIN_ID (Base if unset).

    The variable is read on every call.

    Raises:
        UnknownChain: If the configured value is not a known chain id
    """
    raw = os.environ.get(DEFAULT_CHAIN_ID_ENV)
    if raw is None or not raw.strip():
        return ChainId.BASE
    try:
        chain_id = int(raw)
    except ValueError as e:
        raise UnknownChain(f"{DEFAULT_CHAIN_ID_ENV} is not an integer: {raw!r}") from e
    return resolve_chain(chain_id)


def is_stablecoin(chain_id: int | None, address: str) -> bool:
    """Check if an address is a configured stablecoin on the chain."""
    return normalize_address(address) in STABLECOINS[resolve_chain(chain_id)]


def is_native(address: str) -> bool:
    """Check if an address denotes the native currency."""
    return normalize_address(address) == ZERO_ADDRESS


def is_wrapped_native(chain_id: int | None, address: str) -> bool:
    """Check if an address is the chain's wrapped native currency."""
    return normalize_address(address) == WRAPPED_NATIVE.get(resolve_chain(chain_id))


__all__ = [
    "ChainId",
    "DEFAULT_CHAIN_ID_ENV",
    "STABLECOINS",
    "WRAPPED_NATIVE",
    "resolve_chain",
    "get_default_chain_id",
    "is_stablecoin",
    "is_native",
    "is_wrapped_native",
]
