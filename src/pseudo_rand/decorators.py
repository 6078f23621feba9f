"""@safe decorator for turning raised sampling errors into Err values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from pseudo_rand.result import Err, Ok

__all__ = ['safe']


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and Err(error)
    if one of ``exceptions`` is raised. Exceptions that carry a struct variant
    (a ``to_struct()`` method, like InvalidParameterError) are returned as that
    struct, so Err payloads stay serializable.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(InvalidParameterError,))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Ok[T] | Err[E] instead of T.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            to_struct = getattr(e, 'to_struct', None)
            return Err(to_struct() if callable(to_struct) else e)

    if func is not None:
        return wrapper(func)
    return wrapper
