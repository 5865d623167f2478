"""Thread-local record of the route the last determinant call took.

Internal/test helper; each thread sees only its own calls.
"""

from __future__ import annotations

import threading

_state = threading.local()


def record(route: str) -> None:
    _state.route = route


def last_route() -> str:
    return getattr(_state, "route", "")


def clear() -> None:
    _state.route = ""
