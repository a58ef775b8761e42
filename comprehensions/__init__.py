"""
Lazy for-comprehensions over 1 to 8 iterables.

    from comprehensions import For

    For(xs, ys).yield_(lambda x, y: (x, y))   # lazy, nested-loop order

Architecture:
- LazySeq - lazy restartable sequence (map / flat_map / filter / take / tap)
- cross_productM - generic right-nested bind over N monadic values
- cross_product - sugar for LazySeq
- For, For1..For8 - immutable builders, yield_ / yield_result / yield_catching / traverse
"""

# Core types
from ._types import MAX_ARITY, Binder, Effect, Mapper, Predicate, ResultYielder, Yielder

# Internal helpers (for custom builders)
from . import _helpers

# Lazy sequence
from .seq import LazySeq

# Engine and Result bridge
from .cross import catching, cross_product, cross_productM, sequence, traverse

# Builders
from .builder import For, For1, For2, For3, For4, For5, For6, For7, For8, ForBuilder

# Errors
from ._errors import ArityMismatchError, EmptySequenceError, NotIterableError, NullArgumentError

__all__ = (
    # Types
    "MAX_ARITY",
    "Binder",
    "Effect",
    "Mapper",
    "Predicate",
    "ResultYielder",
    "Yielder",
    # Internal helpers (for custom builders)
    "_helpers",
    # Lazy sequence
    "LazySeq",
    # Engine
    "cross_product",
    "cross_productM",
    # Result bridge
    "catching",
    "sequence",
    "traverse",
    # Builders
    "For",
    "For1",
    "For2",
    "For3",
    "For4",
    "For5",
    "For6",
    "For7",
    "For8",
    "ForBuilder",
    # Errors
    "ArityMismatchError",
    "EmptySequenceError",
    "NotIterableError",
    "NullArgumentError",
)
