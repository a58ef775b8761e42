"""Result combinators

Bridge between the lazy cross product and kungfu Result:
- catching: exceptions of an N-ary function -> Error values
- sequence: [Result[T, E]] -> Result[[T], E], stops at the first Error
- traverse: map then sequence"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from functools import wraps

from kungfu import Error, Ok, Result

from .._types import ResultYielder, Yielder


def catching[R, E](
    f: Yielder[R],
    *,
    on_error: Callable[[Exception], E],
) -> ResultYielder[R, E]:
    """
    Wrap f so that exceptions it raises come back as Error(on_error(exc)).

    Keeps f's signature (functools.wraps), so arity checks still see
    the parameters of f.

    Example:
        parse = catching(int, on_error=lambda e: str(e))
        parse("1")    # Ok(1)
        parse("x")    # Error("invalid literal for int() ...")

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """

    @wraps(f)
    def run(*args: typing.Any) -> Result[R, E]:
        try:
            return Ok(f(*args))
        except Exception as exc:
            return Error(on_error(exc))

    return run


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Flip structure: [Result[T]] -> Result[[T]].

    Pulls results in order and stops at the first Error,
    later elements of a lazy iterable are never computed.
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(v):
                values.append(v)
            case Error(e):
                return Error(e)
            case other:
                raise TypeError(f"expected Result, got {type(other).__name__}")
    return Ok(values)


def traverse[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], Result[T, E]],
) -> Result[list[T], E]:
    """Monadic map: A -> Result[T]. Sequential, short-circuits on Error."""
    return sequence(handler(item) for item in items)


__all__ = ("catching", "sequence", "traverse")
