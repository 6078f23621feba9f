"""Flat sampling functions, one per distribution.

Every argument must be a real number (bools excluded), otherwise
``TypeError('Wrong types of arguments')``. Domain errors raise
InvalidParameterError.

Example:
    >>> from pseudo_rand import api
    >>> 1 <= api.uni_int(1, 6) <= 6
    True
"""

from __future__ import annotations

import math
import numbers

from pseudo_rand.distributions import (
    Exponential,
    Geometric,
    Normal,
    ProactiveExpNormal,
    UniformInt,
    UniformReal,
)
from pseudo_rand.errors import InvalidParameterError
from pseudo_rand.sampler import draw

__all__ = [
    'exp',
    'geo',
    'norm',
    'pnorm',
    'uni_int',
    'uni_real',
]


def _check_numbers(*values: object) -> None:
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError('Wrong types of arguments')


def _truncate(kind: str, parameter: str, value: float) -> int:
    if not math.isfinite(value):
        raise InvalidParameterError(kind, parameter, f'must be finite, got {value!r}')
    return int(value)


def uni_int(minimum: float, maximum: float) -> int:
    """Integer uniformly from [minimum, maximum]; real bounds truncate toward zero."""
    _check_numbers(minimum, maximum)
    return draw(
        UniformInt(
            min=_truncate('UniformInt', 'min', minimum),
            max=_truncate('UniformInt', 'max', maximum),
        )
    )


def uni_real(minimum: float, maximum: float) -> float:
    """Real uniformly from [minimum, maximum)."""
    _check_numbers(minimum, maximum)
    return draw(UniformReal(min=float(minimum), max=float(maximum)))


def geo(p: float) -> int:
    """Failures before the first success with success probability ``p``."""
    _check_numbers(p)
    return draw(Geometric(p=float(p)))


def exp(rate: float) -> float:
    """Exponential interarrival time with rate ``rate``."""
    _check_numbers(rate)
    return draw(Exponential(rate=float(rate)))


def norm(mean: float, stddev: float) -> float:
    """Gaussian with the given mean and standard deviation."""
    _check_numbers(mean, stddev)
    return draw(Normal(mean=float(mean), stddev=float(stddev)))


def pnorm(mean_rate: float, stddev_rate: float) -> float:
    """Composite exponential-normal draw; see ProactiveExpNormal."""
    _check_numbers(mean_rate, stddev_rate)
    return draw(ProactiveExpNormal(mean_rate=float(mean_rate), stddev_rate=float(stddev_rate)))
