"""Dispatcher options and process-wide defaults.

``configure()`` updates the defaults consumed by dispatchers created
afterwards; existing instances keep the options they were built with.

Example::

    import eventqueues

    eventqueues.configure(debug=True, separator=":")
    queues = eventqueues.EventQueues(name="orders")
    assert queues.separator == ":"
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eventqueues.exceptions import OptionsValidationError


class QueueOptions(BaseModel):
    """Validated, immutable dispatcher options.

    Attributes:
        debug: Emit debug trace messages for successful operations.
        name: Instance name tagged onto every log message.
        separator: Sub-namespace separator used when parsing names.

    Raises:
        OptionsValidationError: If a field fails pydantic validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    debug: bool = False
    name: str = Field(default="EventQueues", min_length=1)
    separator: str = Field(default=".", min_length=1)

    def __init__(self, **data: Any) -> None:
        """Wrap pydantic ValidationError into OptionsValidationError."""
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise OptionsValidationError(str(exc)) from exc

    def merged(self, **overrides: Any) -> "QueueOptions":
        """Return a new options object with *overrides* applied.

        ``None`` values are ignored so that unset keyword arguments fall
        back to the current values.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return QueueOptions(**data)


_defaults = QueueOptions()


def configure(
    *,
    debug: bool | None = None,
    name: str | None = None,
    separator: str | None = None,
) -> QueueOptions:
    """Update the process-wide default options.

    Args:
        debug: Default debug flag for new instances.
        name: Default instance name.
        separator: Default sub-namespace separator.

    Returns:
        The new defaults.

    Raises:
        OptionsValidationError: If a value is invalid; defaults are left
            unchanged.
    """
    global _defaults
    _defaults = _defaults.merged(debug=debug, name=name, separator=separator)
    return _defaults


def get_defaults() -> QueueOptions:
    """Return the current process-wide default options."""
    return _defaults


def reset_defaults() -> QueueOptions:
    """Restore the built-in default options."""
    global _defaults
    _defaults = QueueOptions()
    return _defaults
