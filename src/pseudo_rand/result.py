"""Result type: Ok[T] | Err[E] for sampling calls that report errors as values.

``sample()`` returns ``Ok(value)`` or ``Err(InvalidParameter(...))`` instead of
raising, which suits callers that sample inside comprehensions or pipelines:

    >>> from pseudo_rand import Geometric, sample
    >>> sample(Geometric(p=0.0))
    Err(error=InvalidParameter(kind='Geometric', parameter='p', reason='must be in (0, 1], got 0.0'))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(4)
        >>> ok.unwrap()
        4
        >>> ok.map(lambda x: x * 2)
        Ok(value=8)
    """

    value: T

    def is_ok(self) -> bool:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error."""
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value."""
        return f(self.value)

    def ok(self) -> T:
        """Return the value."""
        return self.value

    def err(self) -> None:
        """Return None since this is Ok."""
        return None


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('bad p')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> bool:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Error structs with a ``to_exception()`` method are raised as their
        exception variant, exceptions are raised as-is, and any other payload
        raises RuntimeError.
        """
        to_exception = getattr(self.error, 'to_exception', None)
        if callable(to_exception):
            raise to_exception()
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the error."""
        return f(self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise RuntimeError with a custom message."""
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def ok(self) -> None:
        """Return None since this is Err."""
        return None

    def err(self) -> E:
        """Return the error."""
        return self.error


type Result[T, E] = Ok[T] | Err[E]
