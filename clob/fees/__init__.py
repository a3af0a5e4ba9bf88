"""Fee policies for order-book takers and makers."""

from clob.fees.config import DEFAULT_FEE_CONFIG, FeeConfig, get_fee_config
from clob.fees.policy import FeePolicy

__all__ = [
    "FeePolicy",
    "FeeConfig",
    "DEFAULT_FEE_CONFIG",
    "get_fee_config",
]
