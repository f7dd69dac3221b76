"""Synchronous dispatcher for namespaced event queues."""

from concurrent.futures import Future
from typing import Any

from loguru import logger

from eventqueues.base_queues import BaseEventQueues
from eventqueues.registry import HandlerQueue
from eventqueues.utils import callable_name

log = logger.bind(source=__name__)


class EventQueues(BaseEventQueues):
    """Synchronous namespaced event queues.

    ``emit()`` runs the whole fold before returning and hands back an
    already settled :class:`concurrent.futures.Future`.  The ``is_async``
    flag of each registration is recorded but not acted on here; use
    :class:`AsyncEventQueues` to await flagged handlers.
    """

    def emit(self, name: str, *args: Any) -> Future[Any]:
        """Fold the queue bound to *name* and return the settled outcome.

        The first handler is called with ``*args``; every later handler is
        called with the previous handler's return value.  Non-callable
        entries are skipped and pass the previous value through.

        Emitting a name with several sub-namespaces settles on the first
        one; the remaining sub-namespaces are not processed.

        Example::

            queues.on("calc", lambda x: x + 1).on("calc", lambda y: y * 2)
            assert queues.emit("calc", 5).result() == 12

        Args:
            name: Dotted namespace.
            *args: Arguments for the first handler.

        Returns:
            A settled future.  Its result is the last handler's return
            value, or None when the namespace or queue does not exist.
            If a handler raises, the future holds that exception and no
            later handler runs.

        Raises:
            InvalidNamespaceError: If name has an empty segment.  Raised
                directly, never routed through the future.
        """
        queue = self.queue(name)
        outcome: Future[Any] = Future()

        if queue is None:
            self._trace("emit ({}): no queue, resolved with None", name)
            outcome.set_result(None)
            return outcome

        try:
            result = self._fold(queue, args)
        except Exception as exc:
            self._trace("emit ({}) rejected: {!r}", name, exc)
            outcome.set_exception(exc)
        else:
            self._trace("emit ({}) resolved over {} handler(s)", name, len(queue))
            outcome.set_result(result)
        return outcome

    def _fold(self, queue: HandlerQueue, args: tuple[Any, ...]) -> Any:
        result = None
        for index, entry in enumerate(queue):
            if not callable(entry.handler):
                self._warn("emit: skipping non-callable entry {!r}", entry.handler)
                continue
            log.trace("Fold step {}: {}", index, callable_name(entry.handler))
            result = self._invoke(index, entry.handler, args, result)
        return result
