"""Shared type definitions for eventqueues.

All type aliases use PEP 695 ``type`` statement syntax.
"""

from collections.abc import Callable
from typing import Any

from eventqueues.namespace import Primary

type Handler = Callable[..., Any]
"""A queue handler.

The first handler of a fold receives the emitted arguments; every later
handler receives the previous handler's return value as its only argument.
"""

type SubKey = str | Primary
"""Key of a queue under a main namespace: a sub-namespace or ``PRIMARY``."""
