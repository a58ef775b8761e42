"""Internal helpers for comprehensions.

Boundary checks shared by the builders and the Result-typed yields.
Not part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Iterable

from ._errors import ArityMismatchError, NotIterableError, NullArgumentError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def require_not_none[T](value: T | None, name: str) -> T:
    """Fail fast with NullArgumentError instead of deep inside traversal."""
    if value is None:
        raise NullArgumentError(name)
    return value


def require_iterable[T](value: Iterable[T] | None, name: str) -> Iterable[T]:
    """
    Check that value can be iterated, without iterating it.

    Objects with only the legacy __getitem__ protocol are accepted too,
    the same way iter() accepts them.
    """
    value = require_not_none(value, name)
    if not isinstance(value, Iterable) and not hasattr(type(value), "__getitem__"):
        raise NotIterableError(name, type(value))
    return value


def check_arity(f: Callable[..., typing.Any], arity: int) -> None:
    """
    Ensure f can be called with exactly `arity` positional arguments.

    Defaults and *args are allowed as long as the call binds.
    Required keyword-only parameters never bind and are a mismatch.

    NOTE: Some builtins have no introspectable signature. They pass here
          and a mismatch surfaces as their own TypeError on first call.
    """
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*range(arity))
    except TypeError:
        raise ArityMismatchError(arity, _positional_count(signature), what="parameters") from None


def require_function[F: Callable[..., typing.Any]](f: F | None, arity: int, name: str = "f") -> F:
    """None check, callable check and arity check in one step."""
    f = require_not_none(f, name)
    if not callable(f):
        raise TypeError(f"{name} is not callable: {type(f).__name__}")
    check_arity(f, arity)
    return f


def _positional_count(signature: inspect.Signature) -> int | None:
    params = signature.parameters.values()
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return None
    return sum(1 for p in params if p.kind in _POSITIONAL)


__all__ = (
    "require_not_none",
    "require_iterable",
    "check_arity",
    "require_function",
)
