"""Default fee policies per chain."""

from __future__ import annotations

from dataclasses import dataclass, field

from clob.chains import ChainId, resolve_chain
from clob.fees.policy import FeePolicy


@dataclass(frozen=True)
class FeeConfig:
    """Default maker/taker policies applied when a snapshot omits them.

    Attributes:
        maker_policy: Maker policy (default: no fee, charged in quote)
        taker_policy: Taker policy (default: 0.01%, charged in quote)
    """

    maker_policy: FeePolicy = field(default_factory=lambda: FeePolicy(True, 0))
    taker_policy: FeePolicy = field(default_factory=lambda: FeePolicy(True, 100))


# Testnet rebates makers 0.03% and charges takers 0.1%
_CHAIN_FEE_CONFIGS: dict[ChainId, FeeConfig] = {
    ChainId.CLOBER_TESTNET: FeeConfig(
        maker_policy=FeePolicy(True, -300),
        taker_policy=FeePolicy(True, 1000),
    ),
}

# Default configuration instance
DEFAULT_FEE_CONFIG = FeeConfig()


def get_fee_config(chain_id: int | None = None) -> FeeConfig:
    """Fee configuration for a chain (the default chain if None).

    Raises:
        UnknownChain: If chain_id is not a known chain
    """
    return _CHAIN_FEE_CONFIGS.get(resolve_chain(chain_id), DEFAULT_FEE_CONFIG)


__all__ = ["FeeConfig", "DEFAULT_FEE_CONFIG", "get_fee_config"]
