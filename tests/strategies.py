"""Hypothesis strategies for property-based testing of pseudo-rand requests."""

from hypothesis import strategies as st
from pseudo_rand import (
    DistributionRequest,
    Exponential,
    Geometric,
    Normal,
    ProactiveExpNormal,
    UniformInt,
    UniformReal,
)
from pseudo_rand.types import MIN_RATE

# -----------------------------------------------------------------------------
# Parameter strategies
# -----------------------------------------------------------------------------

int64s = st.integers(min_value=-(2**63), max_value=2**63 - 1)

reals = st.floats(allow_nan=False, allow_infinity=False)

probabilities = st.floats(min_value=1e-6, max_value=1.0, exclude_min=False)

rates = st.floats(min_value=MIN_RATE, allow_infinity=False)

stddevs = st.floats(min_value=0.0, max_value=1e6)

# Normal means stay clear of float max so mean + stddev * z is finite
means = st.floats(min_value=-1e300, max_value=1e300)

non_finite = st.sampled_from([float('nan'), float('inf'), float('-inf')])


@st.composite
def ordered_pair(draw: st.DrawFn, values: st.SearchStrategy) -> tuple:
    """Generate (low, high) with low <= high."""
    a, b = draw(values), draw(values)
    return (a, b) if a <= b else (b, a)


# -----------------------------------------------------------------------------
# Request strategies
# -----------------------------------------------------------------------------

uniform_ints = ordered_pair(int64s).map(lambda pair: UniformInt(min=pair[0], max=pair[1]))

uniform_reals = ordered_pair(reals).map(lambda pair: UniformReal(min=pair[0], max=pair[1]))

geometrics = probabilities.map(lambda p: Geometric(p=p))

exponentials = rates.map(lambda rate: Exponential(rate=rate))

normals = st.builds(Normal, mean=means, stddev=stddevs)

proactives = st.builds(ProactiveExpNormal, mean_rate=rates, stddev_rate=rates)

requests: st.SearchStrategy[DistributionRequest] = st.one_of(
    uniform_ints,
    uniform_reals,
    geometrics,
    exponentials,
    normals,
    proactives,
)
