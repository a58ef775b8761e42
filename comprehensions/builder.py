"""
For-comprehension builders
==========================

Syntactic sugar for nested loops:

    For(xs, ys, zs).yield_(f)

instead of

    for x in xs:
        for y in ys:
            for z in zs:
                f(x, y, z)

Given 1 <= N <= 8 iterables and an N-ary f, the result is a lazy sequence
of f applied to every element of the cross product, outer iterable slowest:

    { f(v1, ..., vN) | v1 ∈ ts1, ..., vN ∈ tsN }

Architecture:
- ForBuilder - one generic implementation, arity is a class constant
- For1..For8 - arity-specific front ends (typing only, no extra logic)
- For      - factory dispatching on the number of iterables
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Result

from ._errors import ArityMismatchError
from ._helpers import require_function, require_iterable, require_not_none
from ._types import MAX_ARITY, ResultYielder, Yielder
from .cross import catching, cross_product, sequence
from .seq import LazySeq


def _wrap_all(iterables: tuple[Iterable[typing.Any], ...]) -> tuple[LazySeq[typing.Any], ...]:
    # ts1..tsN, 1-based like the parameters they come from
    return tuple(
        LazySeq.wrap(require_iterable(it, f"ts{position}"))
        for position, it in enumerate(iterables, start=1)
    )


# ============================================================================
# Generic builder
# ============================================================================


@dataclass(frozen=True, slots=True, init=False)
class ForBuilder:
    """
    Immutable capture of N lazy sequences.

    Construction validates and wraps, it never traverses.
    Every yield_* call returns a new independent sequence.
    """

    arity: typing.ClassVar[int] = 0

    sequences: tuple[LazySeq[typing.Any], ...]

    def __init__(self, *iterables: Iterable[typing.Any]) -> None:
        if not self.arity:
            raise TypeError("ForBuilder has no arity, use For or For1..For8")
        if len(iterables) != self.arity:
            raise ArityMismatchError(self.arity, len(iterables), what="iterables")
        object.__setattr__(self, "sequences", _wrap_all(iterables))

    def yield_[R](self, f: Yielder[R], /) -> LazySeq[R]:
        """
        Yield f(v1, ..., vN) for every element of the cross product.

        f is checked now (None, arity) and called only when the consumer
        pulls an element. Exceptions raised by f propagate unchanged.
        """
        f = require_function(f, self.arity)
        return cross_product(self.sequences, f)

    def yield_result[R, E](self, f: ResultYielder[R, E], /) -> LazySeq[Result[R, E]]:
        """
        yield_ for functions reporting failure as a Result value.

        Same evaluation as yield_, only the element type differs.
        Elements are not checked here; traverse rejects non-Result values.
        """
        return self.yield_(f)

    def yield_catching[R, E](
        self,
        f: Yielder[R],
        /,
        *,
        on_error: Callable[[Exception], E],
    ) -> LazySeq[Result[R, E]]:
        """
        yield_ with exceptions of f lifted into Error(on_error(exc)).

        A failing tuple becomes one Error element, traversal goes on
        with the next tuple.
        """
        f = require_function(f, self.arity)
        on_error = require_not_none(on_error, "on_error")
        return cross_product(self.sequences, catching(f, on_error=on_error))

    def traverse[R, E](self, f: ResultYielder[R, E], /) -> Result[list[R], E]:
        """
        Collect Ok values of f over the cross product.

        Eager. Stops at the first Error, f is not called for later tuples.
        """
        return sequence(self.yield_result(f))

    def tuples(self) -> LazySeq[tuple[typing.Any, ...]]:
        """The raw cross product as N-tuples."""
        return cross_product(self.sequences, _pack)


def _pack(*values: typing.Any) -> tuple[typing.Any, ...]:
    return values


# ============================================================================
# Arity-specific front ends
# ============================================================================


class For1[T1](ForBuilder):
    """For-comprehension of one iterable."""

    __slots__ = ()
    arity = 1

    if typing.TYPE_CHECKING:
        def __init__(self, ts1: Iterable[T1], /) -> None: ...
        def yield_[R](self, f: Callable[[T1], R], /) -> LazySeq[R]: ...


class For2[T1, T2](ForBuilder):
    """For-comprehension of two iterables."""

    __slots__ = ()
    arity = 2

    if typing.TYPE_CHECKING:
        def __init__(self, ts1: Iterable[T1], ts2: Iterable[T2], /) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2], R], /) -> LazySeq[R]: ...


class For3[T1, T2, T3](ForBuilder):
    """For-comprehension of three iterables."""

    __slots__ = ()
    arity = 3

    if typing.TYPE_CHECKING:
        def __init__(self, ts1: Iterable[T1], ts2: Iterable[T2], ts3: Iterable[T3], /) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2, T3], R], /) -> LazySeq[R]: ...


class For4[T1, T2, T3, T4](ForBuilder):
    """For-comprehension of 4 iterables."""

    __slots__ = ()
    arity = 4

    if typing.TYPE_CHECKING:
        def __init__(
            self, ts1: Iterable[T1], ts2: Iterable[T2], ts3: Iterable[T3], ts4: Iterable[T4], /
        ) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2, T3, T4], R], /) -> LazySeq[R]: ...


class For5[T1, T2, T3, T4, T5](ForBuilder):
    """For-comprehension of 5 iterables."""

    __slots__ = ()
    arity = 5

    if typing.TYPE_CHECKING:
        def __init__(
            self,
            ts1: Iterable[T1],
            ts2: Iterable[T2],
            ts3: Iterable[T3],
            ts4: Iterable[T4],
            ts5: Iterable[T5],
            /,
        ) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2, T3, T4, T5], R], /) -> LazySeq[R]: ...


class For6[T1, T2, T3, T4, T5, T6](ForBuilder):
    """For-comprehension of 6 iterables."""

    __slots__ = ()
    arity = 6

    if typing.TYPE_CHECKING:
        def __init__(
            self,
            ts1: Iterable[T1],
            ts2: Iterable[T2],
            ts3: Iterable[T3],
            ts4: Iterable[T4],
            ts5: Iterable[T5],
            ts6: Iterable[T6],
            /,
        ) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2, T3, T4, T5, T6], R], /) -> LazySeq[R]: ...


class For7[T1, T2, T3, T4, T5, T6, T7](ForBuilder):
    """For-comprehension of 7 iterables."""

    __slots__ = ()
    arity = 7

    if typing.TYPE_CHECKING:
        def __init__(
            self,
            ts1: Iterable[T1],
            ts2: Iterable[T2],
            ts3: Iterable[T3],
            ts4: Iterable[T4],
            ts5: Iterable[T5],
            ts6: Iterable[T6],
            ts7: Iterable[T7],
            /,
        ) -> None: ...
        def yield_[R](self, f: Callable[[T1, T2, T3, T4, T5, T6, T7], R], /) -> LazySeq[R]: ...


class For8[T1, T2, T3, T4, T5, T6, T7, T8](ForBuilder):
    """For-comprehension of 8 iterables."""

    __slots__ = ()
    arity = 8

    if typing.TYPE_CHECKING:
        def __init__(
            self,
            ts1: Iterable[T1],
            ts2: Iterable[T2],
            ts3: Iterable[T3],
            ts4: Iterable[T4],
            ts5: Iterable[T5],
            ts6: Iterable[T6],
            ts7: Iterable[T7],
            ts8: Iterable[T8],
            /,
        ) -> None: ...
        def yield_[R](
            self, f: Callable[[T1, T2, T3, T4, T5, T6, T7, T8], R], /
        ) -> LazySeq[R]: ...


_BUILDERS: typing.Final[dict[int, type[ForBuilder]]] = {
    builder.arity: builder for builder in (For1, For2, For3, For4, For5, For6, For7, For8)
}


# ============================================================================
# Factory
# ============================================================================


@typing.overload
def For[T1](ts1: Iterable[T1], /) -> For1[T1]: ...
@typing.overload
def For[T1, T2](ts1: Iterable[T1], ts2: Iterable[T2], /) -> For2[T1, T2]: ...
@typing.overload
def For[T1, T2, T3](
    ts1: Iterable[T1], ts2: Iterable[T2], ts3: Iterable[T3], /
) -> For3[T1, T2, T3]: ...
@typing.overload
def For[T1, T2, T3, T4](
    ts1: Iterable[T1], ts2: Iterable[T2], ts3: Iterable[T3], ts4: Iterable[T4], /
) -> For4[T1, T2, T3, T4]: ...
@typing.overload
def For[T1, T2, T3, T4, T5](
    ts1: Iterable[T1],
    ts2: Iterable[T2],
    ts3: Iterable[T3],
    ts4: Iterable[T4],
    ts5: Iterable[T5],
    /,
) -> For5[T1, T2, T3, T4, T5]: ...
@typing.overload
def For[T1, T2, T3, T4, T5, T6](
    ts1: Iterable[T1],
    ts2: Iterable[T2],
    ts3: Iterable[T3],
    ts4: Iterable[T4],
    ts5: Iterable[T5],
    ts6: Iterable[T6],
    /,
) -> For6[T1, T2, T3, T4, T5, T6]: ...
@typing.overload
def For[T1, T2, T3, T4, T5, T6, T7](
    ts1: Iterable[T1],
    ts2: Iterable[T2],
    ts3: Iterable[T3],
    ts4: Iterable[T4],
    ts5: Iterable[T5],
    ts6: Iterable[T6],
    ts7: Iterable[T7],
    /,
) -> For7[T1, T2, T3, T4, T5, T6, T7]: ...
@typing.overload
def For[T1, T2, T3, T4, T5, T6, T7, T8](
    ts1: Iterable[T1],
    ts2: Iterable[T2],
    ts3: Iterable[T3],
    ts4: Iterable[T4],
    ts5: Iterable[T5],
    ts6: Iterable[T6],
    ts7: Iterable[T7],
    ts8: Iterable[T8],
    /,
) -> For8[T1, T2, T3, T4, T5, T6, T7, T8]: ...


def For(*iterables: Iterable[typing.Any]) -> ForBuilder:
    """
    Create a For-comprehension of 1 to 8 iterables.

    Example:
        For([1, 2], "ab").yield_(lambda x, y: f"{x}{y}").to_list()
        # ["1a", "1b", "2a", "2b"]
    """
    builder = _BUILDERS.get(len(iterables))
    if builder is None:
        raise ArityMismatchError(range(1, MAX_ARITY + 1), len(iterables), what="iterables")
    return builder(*iterables)


__all__ = (
    "ForBuilder",
    "For",
    "For1",
    "For2",
    "For3",
    "For4",
    "For5",
    "For6",
    "For7",
    "For8",
)
