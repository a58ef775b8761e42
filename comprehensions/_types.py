"""
Core type definitions for comprehensions.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Result

# ============================================================================
# Constants
# ============================================================================

# Highest arity exposed through For / For1..For8
MAX_ARITY: typing.Final = 8

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Mapper = one-to-one element transformation
type Mapper[T, R] = Callable[[T], R]

# Binder = one-to-many transformation, concatenated in source order
type Binder[T, R] = Callable[[T], Iterable[R]]

# Effect = observation only, return value ignored
type Effect[T] = Callable[[T], object]

# Yielder = N-ary function applied to every tuple of the cross product
# NOTE: arity is checked at runtime (see _helpers.check_arity),
#       PEP 695 has no variadic Callable parameters.
type Yielder[R] = Callable[..., R]

# ResultYielder = Yielder that reports failure as a value
type ResultYielder[R, E] = Callable[..., Result[R, E]]

__all__ = (
    # Constants
    "MAX_ARITY",
    # Type aliases
    "Predicate",
    "Mapper",
    "Binder",
    "Effect",
    "Yielder",
    "ResultYielder",
)
