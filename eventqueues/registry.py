"""Registry for handler queue management.

This module provides QueueRegistry, the nested mapping of
main namespace -> sub-namespace key -> HandlerQueue owned by a single
dispatcher instance.  The registry only stores; it never parses names
and never invokes handlers.
"""

from collections.abc import Iterator
from typing import Any, NamedTuple

from eventqueues._types import Handler, SubKey


class QueueEntry(NamedTuple):
    """One registration: a handler and its async hint."""

    handler: Handler
    is_async: bool


class HandlerQueue:
    """Ordered handler registrations of one (main, sub) pair.

    Handlers and their async flags are stored as pairs so the two can
    never drift out of step.  ``handlers`` and ``is_async`` expose them as
    parallel, read-only sequences.
    """

    def __init__(self) -> None:
        self._entries: list[QueueEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QueueEntry]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"HandlerQueue({self._entries!r})"

    @property
    def entries(self) -> tuple[QueueEntry, ...]:
        return tuple(self._entries)

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return tuple(entry.handler for entry in self._entries)

    @property
    def is_async(self) -> tuple[bool, ...]:
        return tuple(entry.is_async for entry in self._entries)

    def append(self, handler: Handler, is_async: bool = False) -> None:
        """Append a registration; duplicates are allowed."""
        self._entries.append(QueueEntry(handler, bool(is_async)))

    def keep_only(self, handler: Any) -> int:
        """Drop every entry whose handler is not *handler*.

        Surviving entries keep their original async flag.

        Returns:
            Number of entries dropped.
        """
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.handler is handler]
        return before - len(self._entries)

    def discard(self, handler: Any) -> int:
        """Drop every entry whose handler is *handler*.

        Returns:
            Number of entries dropped.
        """
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.handler is not handler]
        return before - len(self._entries)


class QueueRegistry:
    """Registry table for namespaced handler queues.

    Main entries and queues are created lazily by ``ensure_main()`` and
    ``ensure_queue()``.  ``clear_main()`` and ``clear_sub()`` delete the
    slot outright, so a cleared path reads back as absent and a later
    ``ensure_*`` call starts from a fresh container.
    """

    def __init__(self) -> None:
        """Initialize empty registry.

        Post:
            _queues is an empty dict.
        """
        self._queues: dict[str, dict[SubKey, HandlerQueue]] = {}

    def __contains__(self, main: object) -> bool:
        return main in self._queues

    def __len__(self) -> int:
        return len(self._queues)

    def mains(self) -> list[str]:
        """Return registered main namespaces in creation order."""
        return list(self._queues)

    def has_main(self, main: str) -> bool:
        return main in self._queues

    def has_queue(self, main: str, sub: SubKey) -> bool:
        return sub in self._queues.get(main, {})

    def get_main(self, main: str) -> dict[SubKey, HandlerQueue] | None:
        return self._queues.get(main)

    def get_queue(self, main: str, sub: SubKey) -> HandlerQueue | None:
        entry = self._queues.get(main)
        if entry is None:
            return None
        return entry.get(sub)

    def ensure_main(self, main: str) -> dict[SubKey, HandlerQueue]:
        """Return the entry for *main*, creating an empty one if absent."""
        return self._queues.setdefault(main, {})

    def ensure_queue(self, main: str, sub: SubKey) -> HandlerQueue:
        """Return the queue for (main, sub), creating it (and main) if absent."""
        entry = self.ensure_main(main)
        queue = entry.get(sub)
        if queue is None:
            queue = entry[sub] = HandlerQueue()
        return queue

    def clear_main(self, main: str) -> bool:
        """Delete *main* with all its queues.

        Returns:
            True if the entry existed.
        """
        return self._queues.pop(main, None) is not None

    def clear_sub(self, main: str, sub: SubKey) -> bool:
        """Delete the queue for (main, sub).

        Returns:
            True if the queue existed.
        """
        entry = self._queues.get(main)
        if entry is None:
            return False
        return entry.pop(sub, None) is not None
