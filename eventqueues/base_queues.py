from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Self

from loguru import logger

from eventqueues._types import Handler, SubKey
from eventqueues.namespace import PRIMARY, parse_namespace
from eventqueues.options import QueueOptions, get_defaults
from eventqueues.registry import HandlerQueue, QueueRegistry
from eventqueues.utils import callable_name, sub_label

log = logger.bind(source=__name__)


class BaseEventQueues(ABC):
    """Abstract base class for namespaced event queues.

    Provides common functionality for both sync and async dispatchers:
    - Options and logging
    - Handler binding/unbinding
    - Resolution of the queue an emission folds over

    Subclasses must implement:
    - emit() - Fold dispatching logic
    """

    _options: QueueOptions  # Resolved options for this instance
    _registry: QueueRegistry  # Queues owned by this instance

    def __init__(
        self,
        *,
        debug: bool | None = None,
        name: str | None = None,
        separator: str | None = None,
    ) -> None:
        """Initialize dispatcher.

        Explicit arguments override the process-wide defaults set via
        :func:`eventqueues.configure`.

        Args:
            debug: Emit debug trace messages for successful operations.
            name: Instance name tagged onto log messages.
            separator: Sub-namespace separator.

        Raises:
            OptionsValidationError: If an option is invalid.
        """
        self._options = get_defaults().merged(
            debug=debug, name=name, separator=separator
        )
        self._registry = QueueRegistry()
        self._log = log.bind(queues=self._options.name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"separator={self.separator!r}, debug={self.debug!r})"
        )

    @property
    def options(self) -> QueueOptions:
        return self._options

    @property
    def separator(self) -> str:
        return self._options.separator

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def debug(self) -> bool:
        return self._options.debug

    @property
    def registry(self) -> QueueRegistry:
        return self._registry

    def on(self, name: str, handler: Handler, is_async: bool = False) -> Self:
        """Bind a handler to a namespace.

        The handler is always appended to the main namespace's primary
        queue; a dotted name such as ``"main.a.b"`` additionally appends it
        to the ``a`` and ``b`` queues.

        Args:
            name: Dotted namespace, e.g. ``"main.sub1.sub2"``.
            handler: Callable to append.
            is_async: Marks the handler as returning an awaitable.  Only
                :class:`AsyncEventQueues` acts on the flag.

        Returns:
            self, for chaining.

        Raises:
            InvalidNamespaceError: If name has an empty segment.
        """
        segments = self._parse(name)
        main = segments[0]
        targets: list[SubKey] = [PRIMARY, *segments[1:]]

        for sub in targets:
            self._registry.ensure_queue(main, sub).append(handler, is_async)
            self._trace(
                "bind on {} -> {}.{}", callable_name(handler), main, sub_label(sub)
            )
        return self

    def listen[F: Callable[..., Any]](
        self, name: str, is_async: bool = False
    ) -> Callable[[F], F]:
        """Decorator form of :meth:`on`.

        Returns:
            Decorator function that returns the original function unchanged.

        Raises:
            InvalidNamespaceError: If name has an empty segment.
        """
        self._parse(name)

        def decorator(func: F) -> F:
            self.on(name, func, is_async)
            return func

        return decorator

    def off(self, name: str, handler: Handler | None = None) -> Self:
        """Unbind handlers.

        Supports four modes:
        - ``off("main")``: Remove the main namespace with every queue.
        - ``off("main", handler)``: Remove every occurrence of handler
          from the primary queue.
        - ``off("main.sub")``: Remove the sub queue; the primary queue is
          never removed this way.
        - ``off("main.sub", handler)``: Keep *only* the occurrences of
          handler in the sub queue, dropping every other handler.  Note
          this is the opposite of the primary-queue mode above.

        Missing namespaces are logged as warnings and skipped.

        Args:
            name: Dotted namespace.
            handler: Handler to filter by, or None for whole queues.

        Returns:
            self, for chaining.

        Raises:
            InvalidNamespaceError: If name has an empty segment.
        """
        segments = self._parse(name)
        main, subs = segments[0], segments[1:]

        if not self._registry.has_main(main):
            self._warn("bind off failed: main namespace ({}) does not exist", main)
            return self

        if not subs:
            if handler is None:
                self._registry.clear_main(main)
                self._trace("bind off: removed all queues of ({})", main)
                return self
            queue = self._registry.get_queue(main, PRIMARY)
            if queue is None:
                self._warn("bind off failed: ({}) has no primary queue", main)
                return self
            dropped = queue.discard(handler)
            self._trace(
                "bind off {} from {}.<primary> ({} removed)",
                callable_name(handler),
                main,
                dropped,
            )
            return self

        for sub in subs:
            queue = self._registry.get_queue(main, sub)
            if queue is None:
                self._warn(
                    "bind off failed: sub namespace ({}.{}) does not exist", main, sub
                )
                continue
            if handler is not None:
                dropped = queue.keep_only(handler)
                self._trace(
                    "bind off: kept only {} in {}.{} ({} removed)",
                    callable_name(handler),
                    main,
                    sub,
                    dropped,
                )
            elif sub is PRIMARY:
                continue
            else:
                self._registry.clear_sub(main, sub)
                self._trace("bind off: removed queue ({}.{})", main, sub)
        return self

    def queue(self, name: str) -> HandlerQueue | None:
        """Return the queue an emission of *name* folds over.

        A bare main namespace resolves to its primary queue; a dotted name
        resolves to its first sub-namespace only, since that queue settles
        the emission.

        Returns:
            The queue, or None if the main namespace or queue is absent.

        Raises:
            InvalidNamespaceError: If name has an empty segment.
        """
        segments = self._parse(name)
        main = segments[0]
        if not self._registry.has_main(main):
            return None
        targets = self._emit_targets(segments)
        return self._registry.get_queue(main, targets[0])

    @abstractmethod
    def emit(self, name: str, *args: Any) -> Any:
        """Fold the queue bound to *name* over *args*.

        Args:
            name: Dotted namespace.
            *args: Arguments for the first handler.

        Returns:
            The last handler's return value (sync or async).
        """
        raise NotImplementedError

    # -- helpers ---------------------------------------------------------------

    def _parse(self, name: str) -> list[str]:
        return parse_namespace(name, self.separator)

    @staticmethod
    def _emit_targets(segments: Sequence[str]) -> list[SubKey]:
        """Sub-namespace keys targeted by an emission.

        Unlike :meth:`on`, an emission never adds the primary queue next
        to explicit sub-namespaces.
        """
        if len(segments) == 1:
            return [PRIMARY]
        return list(segments[1:])

    @staticmethod
    def _invoke(
        index: int, handler: Handler, args: tuple[Any, ...], previous: Any
    ) -> Any:
        """Call one fold step.

        The entry at index 0 receives the emitted arguments; later entries
        receive the previous fold value.
        """
        if index == 0:
            return handler(*args)
        return handler(previous)

    def _trace(self, message: str, *args: Any) -> None:
        if self.debug:
            self._log.debug("[{}] " + message, self.name, *args)

    def _warn(self, message: str, *args: Any) -> None:
        self._log.warning("[{}] " + message, self.name, *args)
