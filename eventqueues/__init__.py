"""eventqueues - Namespaced, chained event queues for Python.

Handlers are bound under dotted namespaces such as ``"user.login"`` and
emitted as a fold: each handler's return value feeds the next one.  Both
synchronous and asynchronous dispatch modes are provided.
"""

__version__ = "0.1.0"

from loguru import logger

# Disable all eventqueues logging by default.  Users opt in with:
#     from loguru import logger
#     logger.enable("eventqueues")
logger.disable("eventqueues")

from eventqueues.async_queues import AsyncEventQueues
from eventqueues.exceptions import (
    EventQueuesError,
    InvalidNamespaceError,
    OptionsValidationError,
)
from eventqueues.namespace import PRIMARY, parse_namespace
from eventqueues.options import QueueOptions, configure, get_defaults, reset_defaults
from eventqueues.queues import EventQueues
from eventqueues.registry import HandlerQueue, QueueEntry, QueueRegistry

# Module-level default instance
default_queues = EventQueues()

__all__ = [
    # Version
    "__version__",
    # Dispatcher classes
    "EventQueues",
    "AsyncEventQueues",
    "default_queues",
    # Configuration
    "QueueOptions",
    "configure",
    "get_defaults",
    "reset_defaults",
    # Namespaces and registry
    "PRIMARY",
    "parse_namespace",
    "HandlerQueue",
    "QueueEntry",
    "QueueRegistry",
    # Exception classes
    "EventQueuesError",
    "InvalidNamespaceError",
    "OptionsValidationError",
]
