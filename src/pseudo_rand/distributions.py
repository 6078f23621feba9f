"""Distribution requests: a closed tagged variant, one struct per kind.

Each request knows its own domain (``validate``) and how to turn an engine into
one sample (``draw``). The sampler dispatches on the request, never on a name,
so parameter rules live here and nowhere else.

Requests are frozen ``msgspec.Struct`` types tagged with their class name, so
they round-trip through JSON and MessagePack as e.g.::

    {"type": "Normal", "mean": 0.0, "stddev": 1.0}
"""

from __future__ import annotations

import math
import numbers
from typing import TYPE_CHECKING, Any

import msgspec

from pseudo_rand._config import DEFAULT_MAX_RESAMPLES
from pseudo_rand._logging import get_logger
from pseudo_rand.errors import InvalidParameterError, ResampleExhaustedError
from pseudo_rand.types import INT64_MAX, INT64_MIN, MIN_RATE, Bound, IntBound, Probability, Rate, StdDev

if TYPE_CHECKING:
    import numpy as np

__all__ = [
    'Distribution',
    'DistributionRequest',
    'Exponential',
    'Geometric',
    'Normal',
    'ProactiveExpNormal',
    'UniformInt',
    'UniformReal',
]

logger = get_logger(__name__)


class Distribution(msgspec.Struct, frozen=True, tag=True):
    """Base for all distribution requests."""

    @property
    def kind(self) -> str:
        """The variant tag, e.g. "Normal"."""
        return self.__struct_config__.tag  # type: ignore[return-value]

    def validate(self) -> None:
        """Raise InvalidParameterError if a parameter is outside the domain."""
        raise NotImplementedError

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> int | float:
        """Draw one sample from ``engine``. Assumes ``validate()`` passed."""
        raise NotImplementedError

    def _invalid(self, parameter: str, reason: str) -> InvalidParameterError:
        return InvalidParameterError(self.kind, parameter, reason)

    def _require_finite(self, **params: Any) -> None:
        for name, value in params.items():
            if not math.isfinite(value):
                raise self._invalid(name, f'must be finite, got {value!r}')

    def _require_rate(self, name: str, value: float) -> None:
        if value <= 0.0:
            raise self._invalid(name, f'must be > 0, got {value!r}')
        if value < MIN_RATE:
            raise self._invalid(name, f'must be >= {MIN_RATE!r} so draws stay finite, got {value!r}')


class UniformInt(Distribution, frozen=True):
    """Integer drawn uniformly from the closed interval [min, max]."""

    min: IntBound
    max: IntBound

    def validate(self) -> None:
        for name, value in (('min', self.min), ('max', self.max)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise self._invalid(name, f'must be an integer, got {value!r}')
            if not INT64_MIN <= value <= INT64_MAX:
                raise self._invalid(name, f'must fit in a signed 64-bit integer, got {value!r}')
        if self.min > self.max:
            raise self._invalid('min', f'must be <= max, got min={self.min!r} max={self.max!r}')

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> int:  # noqa: ARG002
        return int(engine.integers(self.min, self.max, endpoint=True))


class UniformReal(Distribution, frozen=True):
    """Real drawn uniformly from the half-open interval [min, max).

    A degenerate interval (min == max) always yields min.
    """

    min: Bound
    max: Bound

    def validate(self) -> None:
        self._require_finite(min=self.min, max=self.max)
        if self.min > self.max:
            raise self._invalid('min', f'must be <= max, got min={self.min!r} max={self.max!r}')

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> float:  # noqa: ARG002
        if self.min == self.max:
            return float(self.min)
        # weighted sum, since max - min can overflow for finite bounds
        u = float(engine.random())
        value = self.min * (1.0 - u) + self.max * u
        if value >= self.max:
            value = math.nextafter(self.max, self.min)
        return max(value, float(self.min))


class Geometric(Distribution, frozen=True):
    """Number of failures before the first success, success probability p."""

    p: Probability

    def validate(self) -> None:
        self._require_finite(p=self.p)
        if not 0.0 < self.p <= 1.0:
            raise self._invalid('p', f'must be in (0, 1], got {self.p!r}')

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> int:  # noqa: ARG002
        # numpy counts trials including the success
        return int(engine.geometric(self.p)) - 1


class Exponential(Distribution, frozen=True):
    """Interarrival time with rate lambda (mean 1/lambda)."""

    rate: Rate

    def validate(self) -> None:
        self._require_finite(rate=self.rate)
        self._require_rate('rate', self.rate)

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> float:  # noqa: ARG002
        return float(engine.exponential(1.0 / self.rate))


class Normal(Distribution, frozen=True):
    """Gaussian with the given mean and standard deviation."""

    mean: float
    stddev: StdDev

    def validate(self) -> None:
        self._require_finite(mean=self.mean, stddev=self.stddev)
        if self.stddev < 0.0:
            raise self._invalid('stddev', f'must be >= 0, got {self.stddev!r}')

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> float:  # noqa: ARG002
        return float(engine.normal(self.mean, self.stddev))


class ProactiveExpNormal(Distribution, frozen=True):
    """Composite draw: log of a normal whose mean and spread are themselves random.

    Steps, all on one engine:

    1. ``m ~ Exponential(mean_rate)``
    2. ``d ~ Exponential(stddev_rate)``
    3. ``x ~ Normal(m, d)``, redrawn while ``x <= 0``
    4. ``res = ln(x)``, reflected to ``2*m - res`` when ``res < m``

    Since ``m >= 0``, each redraw in step 3 succeeds with probability at least
    one half. The result is always finite and never below ``m``.
    """

    mean_rate: Rate
    stddev_rate: Rate

    def validate(self) -> None:
        self._require_finite(mean_rate=self.mean_rate, stddev_rate=self.stddev_rate)
        self._require_rate('mean_rate', self.mean_rate)
        self._require_rate('stddev_rate', self.stddev_rate)

    def draw(self, engine: np.random.Generator, *, max_resamples: int = DEFAULT_MAX_RESAMPLES) -> float:
        m = float(engine.exponential(1.0 / self.mean_rate))
        d = float(engine.exponential(1.0 / self.stddev_rate))

        for attempt in range(1, max_resamples + 1):
            x = float(engine.normal(m, d))
            if x > 0.0:
                break
        else:
            logger.warning('resample_exhausted', kind=self.kind, attempts=max_resamples, m=m, d=d)
            raise ResampleExhaustedError(self.kind, max_resamples)

        if attempt > 1:
            logger.debug('proactive_resampled', attempts=attempt)

        res = math.log(x)
        if res < m:
            res = 2.0 * m - res
        return res


DistributionRequest = UniformInt | UniformReal | Geometric | Exponential | Normal | ProactiveExpNormal
"""Any concrete distribution request."""
