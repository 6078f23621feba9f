"""Constrained type aliases for decode-time validation of request parameters.

msgspec checks these constraints while decoding a request from JSON or
MessagePack, so a payload like ``{"type": "Geometric", "p": 0}`` is rejected
before it ever reaches the sampler. Requests built directly in Python are not
checked at construction; ``validate()`` on the request covers that path and the
cross-field rules (``min <= max``) that ``msgspec.Meta`` cannot express.

Usage:
    >>> import msgspec
    >>> from pseudo_rand.types import Rate
    >>>
    >>> class Poisson(msgspec.Struct):
    ...     rate: Rate
    >>>
    >>> msgspec.json.decode(b'{"rate": 0}', type=Poisson)
    # ValidationError: Expected `float` >= 1e-300 - at `$.rate`

See Also:
    - https://jcristharif.com/msgspec/constraints.html
"""

from __future__ import annotations

from typing import Annotated

import msgspec

__all__ = [
    'INT64_MAX',
    'INT64_MIN',
    'MIN_RATE',
    'Bound',
    'IntBound',
    'Probability',
    'Rate',
    'StdDev',
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Exponential draws scale a unit draw (at most about 45) by 1/rate; at this
# floor the composite stays below float max as well.
MIN_RATE = 1e-300

IntBound = Annotated[int, msgspec.Meta(ge=INT64_MIN, le=INT64_MAX)]
"""Integer bound of a uniform integer range; must fit in a signed 64-bit integer."""

Bound = float
"""Real bound of a uniform real range."""

Probability = Annotated[float, msgspec.Meta(gt=0.0, le=1.0)]
"""Success probability in (0, 1]."""

Rate = Annotated[float, msgspec.Meta(ge=MIN_RATE)]
"""Rate (lambda) parameter, at least MIN_RATE so every draw stays finite."""

StdDev = Annotated[float, msgspec.Meta(ge=0.0)]
"""Non-negative standard deviation."""
