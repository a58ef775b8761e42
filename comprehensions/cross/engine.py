"""Cross product engine

One algorithm for every arity: right-nested bind over N sequences,
ending in a map that applies f to the bound tuple.

    bind seq1 to v1:
      bind seq2 to v2:
        ...
          map seqN to vN -> f(v1, v2, ..., vN)

Generic combinator works with any monad via bind + fmap pattern,
cross_product is the sugar for LazySeq."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from .._errors import ArityMismatchError
from .._types import Yielder
from ..seq import LazySeq

# Generic combinator (bind + fmap pattern)
def cross_productM[M, R](
    seqs: Sequence[M],
    f: Yielder[R],
    *,
    bind: Callable[[M, Callable[[typing.Any], M]], M],
    fmap: Callable[[M, Callable[[typing.Any], R]], M],
) -> M:
    """
    Generic cross product.

    Folds seqs right-to-left into nested binds. The bound prefix is carried
    as a tuple, so f sees (v1, ..., vN) in source order.
    Inner sequences are bound only once the outer one yields an element.
    """
    if not seqs:
        raise ArityMismatchError(1, 0, what="sequences")
    last = len(seqs) - 1

    def step(depth: int, prefix: tuple[typing.Any, ...]) -> M:
        seq = seqs[depth]
        if depth == last:
            return fmap(seq, lambda v: f(*prefix, v))
        return bind(seq, lambda v: step(depth + 1, (*prefix, v)))

    return step(0, ())


# Sugar for LazySeq
def cross_product[R](seqs: Sequence[LazySeq[typing.Any]], f: Yielder[R]) -> LazySeq[R]:
    """
    Lazy mapped cross product of seqs.

    f runs once per element, when the element is pulled. If any sequence
    is empty the result is empty and f is never called; an empty first
    sequence means later sequences are never touched.
    """
    return cross_productM(seqs, f, bind=LazySeq.flat_map, fmap=LazySeq.map)


__all__ = ("cross_product", "cross_productM")
