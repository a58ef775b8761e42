"""LazySeq

Lazy, restartable, order-preserving sequence.

- Lazy: nothing is pulled from the source until a consumer iterates
- Restartable: every iter() starts a fresh cursor
- Composable: map / flat_map / filter / take / tap return new LazySeq

Re-iterable sources (list, range, dict views, another LazySeq) are traversed
from the source on every iteration, nothing is memoized. One-shot iterators
(generators, file objects) can't be restarted, so they are buffered on demand
the first time they are pulled and replayed afterwards."""

from __future__ import annotations

import itertools
import threading
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError
from .._types import Binder, Effect, Mapper, Predicate

_MISSING: typing.Final = object()


class _Replay[T]:
    """
    Shared on-demand buffer over a one-shot iterator.

    Each iteration replays what is buffered, then pulls further elements
    from the source under a lock, so concurrent cursors see the same order.
    """

    __slots__ = ("_source", "_buffer", "_lock", "_done", "_error")

    def __init__(self, source: Iterator[T], /) -> None:
        self._source = source
        self._buffer: list[T] = []
        self._lock = threading.Lock()
        self._done = False
        self._error: BaseException | None = None

    def __iter__(self) -> Iterator[T]:
        index = 0
        while True:
            with self._lock:
                if index < len(self._buffer):
                    item = self._buffer[index]
                elif self._error is not None:
                    raise self._error
                elif self._done:
                    return
                else:
                    try:
                        item = next(self._source, _MISSING)
                    except Exception as exc:
                        # generator is finished after raising, replay the failure
                        self._error = exc
                        raise
                    if item is _MISSING:
                        self._done = True
                        return
                    self._buffer.append(item)
            index += 1
            yield item


class LazySeq[T]:
    """Lazy sequence backed by a thunk that opens a fresh iterator.

    Functor / monad laws (for pure functions):
    - map(identity) ≡ self
    - flat_map(LazySeq.of) ≡ self
    - flat_map(f).flat_map(g) ≡ flat_map(x => f(x).flat_map(g))
    """

    __slots__ = ("_open",)

    def __init__(self, open_: Callable[[], Iterator[T]], /) -> None:
        """Create LazySeq from a fn returning a new iterator per traversal."""
        self._open = open_

    # Constructors

    @staticmethod
    def wrap[V](iterable: Iterable[V], /) -> LazySeq[V]:
        """
        Zero-copy lazy view over iterable.

        Nothing is traversed here. A LazySeq is returned as is.
        """
        if isinstance(iterable, LazySeq):
            return typing.cast(LazySeq[V], iterable)
        if isinstance(iterable, Iterator):
            replay = _Replay(iterable)
            return LazySeq(replay.__iter__)
        return LazySeq(lambda: iter(iterable))

    @staticmethod
    def of[V](*items: V) -> LazySeq[V]:
        """Sequence of the given items."""
        return LazySeq(lambda: iter(items))

    @staticmethod
    def empty() -> LazySeq[typing.Never]:
        """Sequence without elements."""
        return LazySeq(lambda: iter(()))

    # Functor operations

    def map[U](self, f: Mapper[T, U], /) -> LazySeq[U]:
        """Apply f to each element as it is pulled."""

        def run() -> Iterator[U]:
            return (f(x) for x in self)

        return LazySeq(run)

    # Monad operations

    def flat_map[U](self, f: Binder[T, U], /) -> LazySeq[U]:
        """
        Monadic bind (>>=).

        The outer cursor advances only after the sub-sequence of the current
        element is exhausted, so the result is the concatenation of f(x)
        in source order.
        """

        def run() -> Iterator[U]:
            return (y for x in self for y in f(x))

        return LazySeq(run)

    # Selection

    def filter(self, predicate: Predicate[T], /) -> LazySeq[T]:
        """Keep elements matching predicate."""

        def run() -> Iterator[T]:
            return (x for x in self if predicate(x))

        return LazySeq(run)

    def take(self, n: int, /) -> LazySeq[T]:
        """First n elements; later elements are never computed."""
        if n < 0:
            raise ValueError(f"take() count must be >= 0, got {n}")
        return LazySeq(lambda: itertools.islice(self, n))

    # Effects

    def tap(self, effect: Effect[T], /) -> LazySeq[T]:
        """
        Run effect on each element as it is pulled.

        For observation only (logging, metrics, debugging),
        elements pass through unchanged.
        """

        def run() -> Iterator[T]:
            for x in self:
                effect(x)
                yield x

        return LazySeq(run)

    # Access

    def __iter__(self) -> Iterator[T]:
        return self._open()

    def is_empty(self) -> bool:
        """
        True if the sequence has no elements.

        NOTE: Computes the first element (if any) to answer.
        """
        return next(iter(self), _MISSING) is _MISSING

    def head(self) -> T:
        """First element, EmptySequenceError if there is none."""
        item = next(iter(self), _MISSING)
        if item is _MISSING:
            raise EmptySequenceError()
        return typing.cast(T, item)

    def first(self) -> Result[T, EmptySequenceError]:
        """First element as a Result instead of an exception."""
        item = next(iter(self), _MISSING)
        if item is _MISSING:
            return Error(EmptySequenceError())
        return Ok(typing.cast(T, item))

    # Conversions

    def to_list(self) -> list[T]:
        return list(self)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self)

    def count(self) -> int:
        """Number of elements (traverses the whole sequence)."""
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LazySeq({self._open!r})"


__all__ = ("LazySeq",)
