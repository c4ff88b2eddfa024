from typing import Iterable
from .types import Float

# min/max are associative and commutative, so rule order never matters.
# Empty input gives the identity element of each norm.

def t_min(vals: Iterable[Float]) -> Float:
    return float(min(vals, default=1.0))

def s_max(vals: Iterable[Float]) -> Float:
    return float(max(vals, default=0.0))
