"""Order-book simulation error classes.

These errors map to the revert reasons of the on-chain libraries. All of them
are precondition violations on malformed input: they are raised immediately
and are never retried. An empty book or a breached limit price is a valid
zero fill, not an error.
"""


class ClobError(Exception):
    """Base error for order-book simulation."""

    pass


class OutOfRange(ClobError, ValueError):
    """Tick or price is outside the protocol bounds."""

    pass


class InvalidFeePolicy(ClobError, ValueError):
    """Fee rate exceeds the allowed magnitude, or a packed policy is malformed."""

    pass


class InvalidTokenPair(ClobError, ValueError):
    """Token pair does not resolve to two distinct currencies, or books don't mirror."""

    pass


class InvalidBook(ClobError, ValueError):
    """Book snapshot is malformed (duplicate ticks, non-positive unit size)."""

    pass


class UnknownChain(ClobError, ValueError):
    """Chain id has no configuration (stablecoins, wrapped native, default fees)."""

    pass


__all__ = [
    "ClobError",
    "OutOfRange",
    "InvalidFeePolicy",
    "InvalidTokenPair",
    "InvalidBook",
    "UnknownChain",
]
