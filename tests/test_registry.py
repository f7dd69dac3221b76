"""Tests for HandlerQueue and QueueRegistry."""

from eventqueues import PRIMARY, HandlerQueue, QueueEntry, QueueRegistry


def h1(x):
    return x


def h2(x):
    return x


class TestHandlerQueue:
    def test_append_preserves_order_and_duplicates(self):
        """Entries keep registration order; duplicates are allowed."""
        q = HandlerQueue()
        q.append(h1)
        q.append(h2, True)
        q.append(h1)
        assert q.handlers == (h1, h2, h1)
        assert q.is_async == (False, True, False)
        assert len(q) == 3

    def test_flag_is_coerced_to_bool(self):
        """Truthy hints are stored as plain booleans."""
        q = HandlerQueue()
        q.append(h1, 1)  # type: ignore[arg-type]
        assert q.entries == (QueueEntry(h1, True),)

    def test_keep_only_aligns_flags(self):
        """keep_only retains matches with their original flags."""
        q = HandlerQueue()
        q.append(h2, True)
        q.append(h1, False)
        q.append(h2, False)
        q.append(h1, True)
        assert q.keep_only(h1) == 2
        assert q.handlers == (h1, h1)
        assert q.is_async == (False, True)

    def test_discard_aligns_flags(self):
        """discard drops matches and keeps the remaining flags in step."""
        q = HandlerQueue()
        q.append(h1, True)
        q.append(h2, False)
        q.append(h1, False)
        q.append(h2, True)
        assert q.discard(h1) == 2
        assert q.handlers == (h2, h2)
        assert q.is_async == (False, True)

    def test_matching_is_by_identity(self):
        """Equal-looking but distinct callables are not matched."""
        q = HandlerQueue()
        q.append(lambda x: x)
        q.append(lambda x: x)
        assert q.discard(lambda x: x) == 0
        assert len(q) == 2


class TestQueueRegistry:
    def test_ensure_queue_creates_lazily(self):
        """ensure_queue creates the main entry and the queue on demand."""
        reg = QueueRegistry()
        assert not reg.has_main("a")
        q = reg.ensure_queue("a", "b")
        assert reg.has_main("a")
        assert reg.has_queue("a", "b")
        assert reg.get_queue("a", "b") is q
        assert reg.ensure_queue("a", "b") is q

    def test_ensure_main_returns_existing(self):
        """ensure_main is idempotent."""
        reg = QueueRegistry()
        entry = reg.ensure_main("a")
        assert reg.ensure_main("a") is entry
        assert "a" in reg
        assert len(reg) == 1

    def test_lookup_of_absent_paths(self):
        """Absent paths read back as None, not empty containers."""
        reg = QueueRegistry()
        assert reg.get_main("a") is None
        assert reg.get_queue("a", PRIMARY) is None
        assert not reg.has_queue("a", PRIMARY)

    def test_clear_main_reads_back_absent(self):
        """A cleared main namespace no longer exists."""
        reg = QueueRegistry()
        old = reg.ensure_queue("a", PRIMARY)
        assert reg.clear_main("a") is True
        assert reg.get_main("a") is None
        assert "a" not in reg
        assert reg.clear_main("a") is False
        assert reg.ensure_queue("a", PRIMARY) is not old

    def test_clear_sub_keeps_siblings(self):
        """clear_sub removes one queue and leaves the others."""
        reg = QueueRegistry()
        reg.ensure_queue("a", PRIMARY)
        reg.ensure_queue("a", "b")
        assert reg.clear_sub("a", "b") is True
        assert not reg.has_queue("a", "b")
        assert reg.has_queue("a", PRIMARY)
        assert reg.clear_sub("a", "b") is False
        assert reg.clear_sub("missing", "b") is False

    def test_mains_in_creation_order(self):
        """mains() lists namespaces in the order they were created."""
        reg = QueueRegistry()
        reg.ensure_main("z")
        reg.ensure_main("a")
        assert reg.mains() == ["z", "a"]
