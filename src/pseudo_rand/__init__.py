"""pseudo-rand: one-shot random sampling from common distributions.

Each call validates its request, draws from an engine seeded by OS entropy,
and returns one fresh sample. Nothing is cached between calls.

Flat imports (preferred):
    from pseudo_rand import sample, draw, Normal, UniformInt
    from pseudo_rand import Ok, Err, InvalidParameter, InvalidParameterError

Submodule imports (for organization):
    from pseudo_rand.api import uni_int, uni_real, geo, exp, norm, pnorm
    from pseudo_rand.codec import decode_json, encode_json
"""

from pseudo_rand._config import EngineMode, SamplerConfig, get_config, init
from pseudo_rand._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from pseudo_rand.distributions import (
    Distribution,
    DistributionRequest,
    Exponential,
    Geometric,
    Normal,
    ProactiveExpNormal,
    UniformInt,
    UniformReal,
)
from pseudo_rand.errors import (
    InvalidParameter,
    InvalidParameterError,
    ResampleExhausted,
    ResampleExhaustedError,
)
from pseudo_rand.result import Err, Ok, Result
from pseudo_rand.sampler import draw, sample

__all__ = [
    # Distributions
    'Distribution',
    'DistributionRequest',
    # Config
    'EngineMode',
    # Result types
    'Err',
    'Exponential',
    'Geometric',
    # Errors
    'InvalidParameter',
    'InvalidParameterError',
    'Normal',
    'Ok',
    'ProactiveExpNormal',
    'ResampleExhausted',
    'ResampleExhaustedError',
    'Result',
    'SamplerConfig',
    'UniformInt',
    'UniformReal',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    # Sampling
    'draw',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
    'sample',
]
