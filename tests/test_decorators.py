"""Tests for the @safe decorator."""

import pytest
from pseudo_rand import Err, InvalidParameter, InvalidParameterError, Ok
from pseudo_rand.decorators import safe


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_ok_on_success(self):
        """@safe wraps successful return in Ok."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)

    def test_safe_returns_err_on_exception(self):
        """@safe catches exception and returns Err."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result, Err)
        assert isinstance(result.error, ZeroDivisionError)

    def test_safe_converts_to_struct(self):
        """Exceptions with a struct variant are returned as that struct."""

        @safe(exceptions=(InvalidParameterError,))
        def reject() -> int:
            raise InvalidParameterError('Exponential', 'rate', 'must be > 0, got 0.0')

        assert reject() == Err(InvalidParameter(kind='Exponential', parameter='rate', reason='must be > 0, got 0.0'))

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) catches only specified exceptions."""

        @safe(exceptions=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Ok(5)
        assert isinstance(risky(-1).error, ValueError)

        with pytest.raises(TypeError):
            risky(0)

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'
