"""
Tests for boundary helpers and error types.
"""

import pytest

from comprehensions import ArityMismatchError, NotIterableError, NullArgumentError, _helpers


class TestRequire:
    """require_not_none / require_iterable / require_function."""

    def test_require_not_none_passes_value_through(self):
        items = [1]
        assert _helpers.require_not_none(items, "ts1") is items

    def test_require_not_none(self):
        with pytest.raises(NullArgumentError, match="ts3 is None"):
            _helpers.require_not_none(None, "ts3")

    def test_require_iterable_accepts_strings_and_iterators(self):
        assert _helpers.require_iterable("ab", "ts1") == "ab"
        it = iter([1])
        assert _helpers.require_iterable(it, "ts1") is it

    def test_require_iterable_rejects_numbers(self):
        with pytest.raises(NotIterableError, match="ts1 is not iterable: float"):
            _helpers.require_iterable(1.5, "ts1")

    def test_require_function_custom_name(self):
        with pytest.raises(NullArgumentError) as exc_info:
            _helpers.require_function(None, 2, name="mapper")
        assert exc_info.value.name == "mapper"


class TestCheckArity:
    """check_arity: bind-based signature check."""

    def test_builtin_without_signature_is_skipped(self):
        # max has no introspectable signature
        _helpers.check_arity(max, 2)

    def test_callable_object(self):
        class Pair:
            def __call__(self, a, b):
                return a, b

        _helpers.check_arity(Pair(), 2)
        with pytest.raises(ArityMismatchError):
            _helpers.check_arity(Pair(), 3)

    def test_varargs_reports_unknown_count(self):
        def f(*args, flag):
            return args

        with pytest.raises(ArityMismatchError) as exc_info:
            _helpers.check_arity(f, 2)
        assert exc_info.value.actual is None
        assert "incompatible signature" in str(exc_info.value)


class TestErrors:
    """Error messages and attributes."""

    def test_arity_mismatch_message(self):
        err = ArityMismatchError(3, 2, what="parameters")
        assert str(err) == "Expected 3 parameters, got 2"
        assert isinstance(err, TypeError)

    def test_arity_range_message(self):
        err = ArityMismatchError(range(1, 9), 9, what="iterables")
        assert str(err) == "Expected 1 to 8 iterables, got 9"

    def test_null_argument_is_value_error(self):
        assert isinstance(NullArgumentError("f"), ValueError)
