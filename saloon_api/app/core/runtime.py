"""
Runtime primitives supplied to the service layer.

The saloon service never reads the clock or generates identifiers on
its own; it receives these two callables when constructed so that
tests and alternative hosts can substitute deterministic versions.
The caller identity is resolved per request by ``core.security``.
"""

import time
import uuid
from typing import Callable

Clock = Callable[[], int]
IdFactory = Callable[[], str]


def current_timestamp() -> int:
    """Return the current time in nanoseconds since the epoch."""
    return time.time_ns()


def new_unique_id() -> str:
    """Return a random UUID4 as text."""
    return str(uuid.uuid4())
