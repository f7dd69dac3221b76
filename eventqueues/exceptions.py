"""Exception hierarchy for eventqueues.

All custom exceptions inherit from EventQueuesError base class.
"""


class EventQueuesError(Exception):
    """Base exception for all eventqueues errors.

    Allows users to catch every framework-specific error with a single
    except clause.
    """


class InvalidNamespaceError(EventQueuesError, ValueError):
    """Namespace string reduced to zero usable segments.

    Raised when:
    - The raw name is empty or whitespace only
    - The raw name consists solely of separators
    - A segment between two separators is blank (e.g. ``"a. .b"``)

    Raised synchronously by ``on()``, ``off()`` and ``emit()`` before the
    registry is touched.
    """


class OptionsValidationError(EventQueuesError, ValueError):
    """Dispatcher options failed validation.

    This wraps pydantic.ValidationError to provide a framework-specific exception type.
    """
