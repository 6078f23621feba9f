"""Sampler core: validate a request, draw it on an engine, return the value.

Two entry points share one code path:

    - ``draw(request)`` returns the sample or raises InvalidParameterError /
      ResampleExhaustedError.
    - ``sample(request)`` returns ``Ok(sample)`` or ``Err(InvalidParameter)`` /
      ``Err(ResampleExhausted)`` and never raises for a bad request.

Validation always runs before an engine is acquired, so a rejected request
consumes no entropy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pseudo_rand._config import get_config
from pseudo_rand._logging import get_logger
from pseudo_rand.decorators import safe
from pseudo_rand.engine import acquire_engine
from pseudo_rand.errors import InvalidParameterError, ResampleExhaustedError

if TYPE_CHECKING:
    from pseudo_rand.distributions import DistributionRequest

__all__ = ['draw', 'sample']

logger = get_logger(__name__)


def draw(request: DistributionRequest) -> int | float:
    """Draw one sample for ``request``.

    Args:
        request: Any distribution request, e.g. ``Normal(mean=0.0, stddev=1.0)``.

    Returns:
        An int for UniformInt and Geometric, a float otherwise.

    Raises:
        InvalidParameterError: A parameter is outside the distribution's domain.
        ResampleExhaustedError: The composite draw hit its resample cap.
    """
    config = get_config()
    try:
        request.validate()
    except InvalidParameterError as e:
        logger.debug('invalid_parameter', kind=e.kind, parameter=e.parameter, reason=e.reason)
        raise

    with acquire_engine(config.engine_mode) as engine:
        value = request.draw(engine, max_resamples=config.max_resamples)

    logger.debug('sample_drawn', kind=request.kind, value=value)
    return value


@safe(exceptions=(InvalidParameterError, ResampleExhaustedError))
def sample(request: DistributionRequest) -> int | float:
    """Draw one sample for ``request``, reporting errors as values.

    Example:
        ```python
        from pseudo_rand import UniformInt, sample

        match sample(UniformInt(min=1, max=6)):
            case Ok(value):
                print(value)
            case Err(error):
                print(error.reason)
        ```
    """
    return draw(request)
