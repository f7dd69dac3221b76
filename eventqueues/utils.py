from typing import Any

from eventqueues.namespace import PRIMARY


def callable_name(cb: Any) -> str:
    """Return a human-readable name for a callable, safe for logging.

    Falls back through ``__qualname__``, ``__name__``, and ``repr()``
    so that ``functools.partial``, callable instances, and other exotic
    callables never raise ``AttributeError``.

    Args:
        cb: Any callable object.

    Returns:
        Display name string.
    """
    return (
        getattr(cb, "__qualname__", None) or getattr(cb, "__name__", None) or repr(cb)
    )


def sub_label(sub: Any) -> str:
    """Display label for a sub-namespace key, ``"<primary>"`` for PRIMARY."""
    return "<primary>" if sub is PRIMARY else str(sub)
