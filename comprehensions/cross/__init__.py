from .engine import cross_product, cross_productM
from .result import catching, sequence, traverse

__all__ = (
    # Engine
    "cross_product",
    "cross_productM",
    # Result bridge
    "catching",
    "sequence",
    "traverse",
)
