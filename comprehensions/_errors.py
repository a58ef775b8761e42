from __future__ import annotations

class NullArgumentError(ValueError):
    """A required iterable or function was None."""

    name: str

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is None")

class ArityMismatchError(TypeError):
    """Number of iterables or function parameters doesn't match the arity."""

    expected: int | range
    actual: int | None

    def __init__(self, expected: int | range, actual: int | None, *, what: str = "arguments") -> None:
        self.expected = expected
        self.actual = actual
        if isinstance(expected, range):
            want = f"{expected.start} to {expected.stop - 1}"
        else:
            want = str(expected)
        got = "an incompatible signature" if actual is None else str(actual)
        super().__init__(f"Expected {want} {what}, got {got}")

class NotIterableError(TypeError):
    """Positional input can't be iterated."""

    name: str
    value_type: type

    def __init__(self, name: str, value_type: type) -> None:
        self.name = name
        self.value_type = value_type
        super().__init__(f"{name} is not iterable: {value_type.__name__}")

class EmptySequenceError(LookupError):
    """head() on a sequence without elements."""

    def __init__(self) -> None:
        super().__init__("head of empty sequence")

__all__ = ("ArityMismatchError", "EmptySequenceError", "NotIterableError", "NullArgumentError")
