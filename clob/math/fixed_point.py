"""Integer fixed-point helpers shared by the tick ladder and fee policies.

Every function here reproduces the contract's 256-bit arithmetic on Python
ints. No floating point is used anywhere: results must match the chain
bit-for-bit.
"""

from __future__ import annotations

__all__ = [
    "divide",
    "div_trunc",
    "ln_wad",
]

# =============================================================================
# Constants for ln_wad (rational approximation coefficients)
# =============================================================================

# Coefficients of the numerator polynomial p, highest degree first
_LN_P = (
    3273285459638523848632254066296,
    24828157081833163892658089445524,
    43456485725739037958740375743393,
    11111509109440967052023855526967,
    45023709667254063763336534515857,
    14706773417378608786704636184526,
    795164235651350426258249787498,
)

# Coefficients of the monic denominator polynomial q, highest degree first
_LN_Q = (
    5573035233440673466300451813936,
    71694874799317883764090561454958,
    283447036172924575727196451306956,
    401686690394027663651624208769553,
    204048457590392012362485061816622,
    31853899698501571402653359427138,
    909429971244387300277376558375,
)

_LN_SCALE = 1677202110996718588342820967067443963516166
_LN_2_SCALED = 16597577552685614221487285958193947469193820559219878177908093499208371
_LN_BASE_DIVISOR = 302231454903657293676544000000000000000000

# Lookup tables for the de Bruijn-style final step of the log2 bit search
_LOG2_DEBRUIJN = 0x8421084210842108CC6318C6DB6D54BE
_LOG2_BYTE_TABLE = 0xF8F9F9FAF9FDFAFBF9FDFCFDFAFBFCFEF9FAFDFAFCFCFBFEFAFAFCFBFFFFFFFF


# =============================================================================
# Division
# =============================================================================


def divide(x: int, y: int, round_up: bool) -> int:
    """Divide two non-negative integers, rounding up or down.

    Args:
        x: Dividend (non-negative)
        y: Divisor (positive)
        round_up: If True, round the quotient up; otherwise truncate

    Returns:
        ceil(x / y) if round_up else floor(x / y)

    Raises:
        ZeroDivisionError: If y is zero
    """
    if y == 0:
        raise ZeroDivisionError("Division by zero in divide")
    if round_up:
        if x == 0:
            return 0
        return (x - 1) // y + 1
    return x // y


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero (EVM sdiv).

    Python's // operator rounds toward negative infinity, but the EVM
    truncates toward zero. This matters for negative logarithms.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


# =============================================================================
# Logarithm
# =============================================================================


def ln_wad(x: int) -> int:
    """Natural logarithm of a 2^96 fixed-point value.

    Port of the contract's lnWad, an (8, 8)-term rational approximation.
    The contract omits the constant shift between the 10^18 and 2^96 bases,
    so the result is ln(x / 2^96) scaled the way fromPrice expects.

    Python's >> on negative ints is an arithmetic shift, which matches the
    EVM's sar, so the intermediate signed values need no special handling.

    Args:
        x: Positive fixed-point input

    Returns:
        Signed fixed-point logarithm

    Raises:
        ValueError: If x is not positive
    """
    if x <= 0:
        raise ValueError(f"ln_wad undefined for non-positive input: {x}")

    # r = 255 ^ log2(x), found with a branchless bit search
    r = int(x > 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF) << 7
    r |= int((x >> r) > 0xFFFFFFFFFFFFFFFF) << 6
    r |= int((x >> r) > 0xFFFFFFFF) << 5
    r |= int((x >> r) > 0xFFFF) << 4
    r |= int((x >> r) > 0xFF) << 3
    index = (_LOG2_DEBRUIJN >> (x >> r)) & 0x1F
    r ^= (_LOG2_BYTE_TABLE >> (248 - index * 8)) & 0xFF

    # Reduce x into (1, 2) * 2^96
    x = (x << r) >> 159

    p = ((_LN_P[0] + x) * x) >> 96
    p = ((_LN_P[1] + p) * x) >> 96
    p = ((_LN_P[2] + p) * x) >> 96
    p = p - _LN_P[3]
    p = ((p * x) >> 96) - _LN_P[4]
    p = ((p * x) >> 96) - _LN_P[5]
    p = p * x - (_LN_P[6] << 96)

    q = _LN_Q[0] + x
    for coefficient in _LN_Q[1:]:
        q = coefficient + ((x * q) >> 96)

    # q has no zeros in the reduced domain
    p = div_trunc(p, q)
    p = _LN_SCALE * p
    p = _LN_2_SCALED * (159 - r) + p
    return div_trunc(p, _LN_BASE_DIVISOR)
