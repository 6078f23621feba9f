"""Random engine provisioning.

Every engine is a ``numpy.random.Generator`` seeded from OS entropy through
``numpy.random.default_rng()``. Two ownership models are supported:

    - EPHEMERAL: a new generator per call, dropped as soon as the draw is done.
      Calls are independent and reseeded every time.
    - THREAD_LOCAL: one generator per thread, created lazily and reused only
      by that thread. Avoids the reseed cost without sharing mutable state.

Thread Safety:
    - ``numpy.random.Generator`` is NOT safe for concurrent mutation
    - ThreadLocalEngines keeps one generator per thread, never shared
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

import numpy as np

from pseudo_rand._config import EngineMode, get_config

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    'ThreadLocalEngines',
    'acquire_engine',
    'get_thread_engines',
    'new_engine',
]


def new_engine() -> np.random.Generator:
    """Create a generator seeded from the OS entropy source."""
    return np.random.default_rng()


class ThreadLocalEngines:
    """Per-thread generator storage.

    Example:
        >>> engines = ThreadLocalEngines()
        >>> engines.get() is engines.get()
        True

    Attributes:
        _local: Thread-local storage for per-thread generators.
    """

    __slots__ = ('_local',)

    def __init__(self) -> None:
        self._local = threading.local()

    def get(self) -> np.random.Generator:
        """Get or create the calling thread's generator."""
        engine = getattr(self._local, 'engine', None)
        if engine is None:
            engine = new_engine()
            self._local.engine = engine
        return engine

    def reset(self) -> None:
        """Drop the calling thread's generator; the next get() reseeds."""
        self._local.engine = None


_thread_engines = ThreadLocalEngines()


def get_thread_engines() -> ThreadLocalEngines:
    """Get the module-level ThreadLocalEngines singleton."""
    return _thread_engines


@contextmanager
def acquire_engine(mode: EngineMode | None = None) -> Iterator[np.random.Generator]:
    """Provide an engine for the duration of one sampling call.

    Args:
        mode: Ownership model. Uses the configured mode if None.

    Yields:
        The generator to draw from.
    """
    if mode is None:
        mode = get_config().engine_mode
    if mode is EngineMode.THREAD_LOCAL:
        yield _thread_engines.get()
    else:
        yield new_engine()
