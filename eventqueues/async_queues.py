import inspect
from typing import Any

from loguru import logger

from eventqueues.base_queues import BaseEventQueues
from eventqueues.utils import callable_name

log = logger.bind(source=__name__)


class AsyncEventQueues(BaseEventQueues):
    """Asynchronous namespaced event queues.

    Shares binding, unbinding and queue resolution with
    :class:`EventQueues`.  During the fold, a handler registered with
    ``is_async=True`` that returns an awaitable is awaited before its
    value is handed to the next handler.  Handlers still run one after
    another; nothing runs in parallel.
    """

    async def emit(self, name: str, *args: Any) -> Any:
        """Asynchronously fold the queue bound to *name*.

        Args:
            name: Dotted namespace.
            *args: Arguments for the first handler.

        Returns:
            The last handler's (awaited, if flagged) return value, or None
            when the namespace or queue does not exist.

        Raises:
            InvalidNamespaceError: If name has an empty segment.
            Exception: Whatever a handler raises; later handlers do not run.
        """
        queue = self.queue(name)
        if queue is None:
            self._trace("emit ({}): no queue, resolved with None", name)
            return None

        result = None
        for index, entry in enumerate(queue):
            if not callable(entry.handler):
                self._warn("emit: skipping non-callable entry {!r}", entry.handler)
                continue
            result = self._invoke(index, entry.handler, args, result)
            if entry.is_async and inspect.isawaitable(result):
                log.trace("Awaiting {}", callable_name(entry.handler))
                result = await result
        self._trace("emit ({}) resolved over {} handler(s)", name, len(queue))
        return result
