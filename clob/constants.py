"""Protocol constants for the order-book contracts.

These values must match the deployed contracts exactly. They are not derived
at runtime: the tick ladder and its bounds are part of the on-chain ABI.
"""

# Prices are unsigned fixed-point numbers with 96 fractional bits
# (quote units per base unit). toPrice(0) == 2^96.
PRICE_PRECISION = 96
PRICE_ONE = 1 << PRICE_PRECISION

# 2^192, the numerator used to take the reciprocal of a price
PRICE_INVERSION_NUMERATOR = 1 << (2 * PRICE_PRECISION)

# Ticks are int24 values restricted to a symmetric 19-bit range
MAX_TICK = 2**19 - 1
MIN_TICK = -MAX_TICK

# Smallest int24, used on-chain as the "no more ticks" marker of a heap walk
TICK_SENTINEL = -(2**23)

# toPrice(MIN_TICK) and toPrice(MAX_TICK)
MIN_PRICE = 1350587
MAX_PRICE = 4647684107270898330752324302845848816923571339324334

# Per-bit ratios of the tick ladder: R[i] = 2^96 / 1.0001^(2^i), rounded the
# way the contract rounds them. Index i applies when bit i of |tick| is set.
TICK_RATIOS = (
    0xFFF97272373D413259A46990,
    0xFFF2E50F5F656932EF12357C,
    0xFFE5CACA7E10E4E61C3624EA,
    0xFFCB9843D60F6159C9DB5883,
    0xFF973B41FA98C081472E6896,
    0xFF2EA16466C96A3843EC78B3,
    0xFE5DEE046A99A2A811C461F1,
    0xFCBE86C7900A88AEDCFFC83B,
    0xF987A7253AC413176F2B074C,
    0xF3392B0822B70005940C7A39,
    0xE7159475A2C29B7443B29C7F,
    0xD097F3BDFD2022B8845AD8F7,
    0xA9F746462D870FDF8A65DC1F,
    0x70D869A156D2A1B890BB3DF6,
    0x31BE135F97D08FD981231505,
    0x9AA508B5B7A84E1C677DE54,
    0x5D6AF8DEDB81196699C329,
    0x2216E584F5FA1EA92604,
    0x48A170391F7DC42,
)

# 2^128 / (2^96 * ln(1.0001)), applied to lnWad(price) to recover a tick
LN_TO_TICK_MULTIPLIER = 42951820407860

# Fee policy parameters (rates are in millionths)
RATE_PRECISION = 10**6
MAX_FEE_RATE = 500_000
MIN_FEE_RATE = -500_000
FEE_POLICY_USES_QUOTE_BIT = 23
FEE_POLICY_RATE_MASK = 0x7FFFFF

# Unit size used when the quote currency is native or wrapped native
NATIVE_UNIT_SIZE = 10**12

# Tokens with a total supply at or below this use unit size 1
UNIT_SIZE_SUPPLY_THRESHOLD = 2**64

# Zero address, used by the contracts to denote the native currency
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

__all__ = [
    "PRICE_PRECISION",
    "PRICE_ONE",
    "PRICE_INVERSION_NUMERATOR",
    "MAX_TICK",
    "MIN_TICK",
    "TICK_SENTINEL",
    "MIN_PRICE",
    "MAX_PRICE",
    "TICK_RATIOS",
    "LN_TO_TICK_MULTIPLIER",
    "RATE_PRECISION",
    "MAX_FEE_RATE",
    "MIN_FEE_RATE",
    "FEE_POLICY_USES_QUOTE_BIT",
    "FEE_POLICY_RATE_MASK",
    "NATIVE_UNIT_SIZE",
    "UNIT_SIZE_SUPPLY_THRESHOLD",
    "ZERO_ADDRESS",
]
