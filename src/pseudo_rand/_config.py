"""Sampler configuration: EngineMode enum, SamplerConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from pseudo_rand._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_MAX_RESAMPLES',
    'EngineMode',
    'SamplerConfig',
    'get_config',
    'init',
]

DEFAULT_MAX_RESAMPLES = 64
MAX_RESAMPLES_LIMIT = 10_000

logger = get_logger(__name__)


class EngineMode(Enum):
    """How a sampling call obtains its random engine."""

    EPHEMERAL = 'ephemeral'
    THREAD_LOCAL = 'thread_local'


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for pseudo-rand sampling.

    Attributes:
        engine_mode: EPHEMERAL seeds a new generator from OS entropy on every
            call. THREAD_LOCAL keeps one entropy-seeded generator per thread.
        max_resamples: Cap on inner redraws for the composite distribution.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    engine_mode: EngineMode = EngineMode.EPHEMERAL
    max_resamples: int = DEFAULT_MAX_RESAMPLES
    log_level: str | None = None


# Global sampler configuration (set by init())
_config: SamplerConfig | None = None


def _detect_engine_mode() -> EngineMode:
    """Detect engine mode from the PSEUDO_RAND_ENGINE environment variable.

    Accepts "ephemeral", "thread_local" or "thread-local" in any case.
    Anything else logs a warning and falls back to EPHEMERAL.
    """
    env_mode = os.environ.get('PSEUDO_RAND_ENGINE', '').strip().lower().replace('-', '_')
    if not env_mode:
        return EngineMode.EPHEMERAL
    try:
        return EngineMode(env_mode)
    except ValueError:
        logger.warning('unknown_engine_mode', value=env_mode, fallback=EngineMode.EPHEMERAL.value)
        return EngineMode.EPHEMERAL


def _detect_max_resamples() -> int:
    """Detect the resample cap from PSEUDO_RAND_MAX_RESAMPLES."""
    raw = os.environ.get('PSEUDO_RAND_MAX_RESAMPLES', '').strip()
    if not raw:
        return DEFAULT_MAX_RESAMPLES
    try:
        return _clamp_resamples(int(raw))
    except ValueError:
        logger.warning('invalid_max_resamples', value=raw, fallback=DEFAULT_MAX_RESAMPLES)
        return DEFAULT_MAX_RESAMPLES


def _clamp_resamples(value: int) -> int:
    return max(1, min(MAX_RESAMPLES_LIMIT, value))


def init(
    engine_mode: EngineMode | str | None = None,
    max_resamples: int | None = None,
    log_level: str | None = None,
) -> SamplerConfig:
    """Initialize pseudo-rand with the specified configuration.

    Args:
        engine_mode: Engine provisioning mode. Read from PSEUDO_RAND_ENGINE if None.
            Can be EngineMode enum or string ("ephemeral", "thread_local").
        max_resamples: Cap on composite inner redraws, clamped to 1..10000.
            Read from PSEUDO_RAND_MAX_RESAMPLES if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            PSEUDO_RAND_LOG_LEVEL if None; unset means silent.

    Returns:
        The SamplerConfig that was set.

    Example:
        ```python
        from pseudo_rand import init, EngineMode

        # Environment and defaults
        init()

        # Explicit configuration
        init(engine_mode=EngineMode.THREAD_LOCAL, max_resamples=16, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if engine_mode is None:
        resolved_mode = _detect_engine_mode()
    elif isinstance(engine_mode, str):
        resolved_mode = EngineMode(engine_mode.lower().replace('-', '_'))
    else:
        resolved_mode = engine_mode

    if max_resamples is None:
        resolved_resamples = _detect_max_resamples()
    else:
        resolved_resamples = _clamp_resamples(max_resamples)

    if log_level is None:
        log_level = os.environ.get('PSEUDO_RAND_LOG_LEVEL') or None

    _config = SamplerConfig(
        engine_mode=resolved_mode,
        max_resamples=resolved_resamples,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> SamplerConfig:
    """Get the current sampler configuration.

    Calls ``init()`` with environment defaults on first use, so sampling
    works without explicit initialization.

    Returns:
        The current SamplerConfig.
    """
    if _config is None:
        return init()
    return _config
