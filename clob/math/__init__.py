"""Mathematical utilities for order-book simulation.

This package provides the integer primitives the contracts rely on:
- divide: rounding-aware unsigned division
- div_trunc: signed division truncating toward zero
- ln_wad: fixed-point natural logarithm used by the tick ladder
"""

from clob.math.fixed_point import div_trunc, divide, ln_wad

__all__ = ["divide", "div_trunc", "ln_wad"]
