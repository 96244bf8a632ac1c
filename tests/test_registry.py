"""
Tests for levelog.registry — lookup-or-create, root handling, creation-time
inheritance, and the process-wide singleton.
"""

import io
import sys
import threading

import pytest

from levelog import registry as _registry_mod
from levelog.levels import TRACE, INFO, ERROR
from levelog.registry import Registry, init_logging, get_registry, get_logger
from levelog.writer import DEFAULT_FLAGS, Flag


# =============================================================================
# Lookup-or-create
# =============================================================================

class TestGet:
    """Test Registry.get()."""

    def test_same_name_same_instance(self, registry):
        assert registry.get("svc") is registry.get("svc")

    def test_parent_ignored_for_existing_name(self, registry):
        first = registry.get("svc")
        other = registry.get("other")
        other.set_output(io.StringIO())
        assert registry.get("svc", other) is first
        assert first.get_output() is not other.get_output()

    def test_empty_name_is_root(self, registry):
        assert registry.get("") is registry.root
        assert registry.get("", registry.get("svc")) is registry.root

    def test_new_logger_defaults(self, registry):
        lg = registry.get("svc")
        assert lg.name == "svc"
        assert lg.get_level() is TRACE
        assert lg.writer.prefix == "svc "

    def test_names_are_not_hierarchical(self, registry):
        """'a.b' is just a name; 'a' is not created or consulted."""
        registry.get("a").set_level(ERROR)
        child = registry.get("a.b")
        assert "a.b" in registry
        assert child.get_level() is TRACE

    def test_names_len_contains(self, registry):
        registry.get("b")
        registry.get("a")
        registry.get("b")
        assert registry.names() == ["", "a", "b"]
        assert len(registry) == 3
        assert "a" in registry
        assert "zzz" not in registry


# =============================================================================
# Root
# =============================================================================

class TestRoot:

    def test_root_always_exists(self):
        reg = Registry(out=io.StringIO())
        assert "" in reg
        assert reg.root.name == ""

    def test_root_defaults(self):
        reg = Registry()
        assert reg.root.get_output() is sys.stderr
        assert reg.root.get_flags() == DEFAULT_FLAGS
        assert reg.root.get_level() is TRACE
        assert reg.root.writer.prefix == ""


# =============================================================================
# Creation-time inheritance
# =============================================================================

class TestInheritance:
    """A new logger copies destination and flags once, then is independent."""

    def test_inherits_from_root_when_no_parent(self, registry, buf):
        registry.root.set_flags(Flag.TIME)
        lg = registry.get("svc")
        assert lg.get_output() is buf
        assert lg.get_flags() == Flag.TIME

    def test_inherits_from_parent(self, registry):
        parent_buf = io.StringIO()
        parent = registry.get("parent")
        parent.set_output(parent_buf)
        parent.set_flags(0)

        child = registry.get("child", parent)
        parent.set_output(io.StringIO())
        parent.set_flags(Flag.STD)

        child.info("hello")
        assert parent_buf.getvalue() == "child info hello\n"
        assert child.get_flags() == Flag(0)

    def test_level_not_inherited(self, registry):
        parent = registry.get("parent")
        parent.set_level(ERROR)
        assert registry.get("child", parent).get_level() is TRACE

    def test_later_root_changes_do_not_propagate(self, registry, buf):
        lg = registry.get("svc")
        registry.root.set_output(io.StringIO())
        registry.root.set_flags(0)
        assert lg.get_output() is buf
        assert lg.get_flags() == DEFAULT_FLAGS

    def test_distinct_names_are_independent(self, bare_registry):
        a = bare_registry.get("a")
        b = bare_registry.get("b")
        a_buf, b_buf = io.StringIO(), io.StringIO()
        a.set_output(a_buf)
        b.set_output(b_buf)
        a.set_level(ERROR)

        a.info("hidden")
        b.info("shown")

        assert b.get_level() is TRACE
        assert a_buf.getvalue() == ""
        assert b_buf.getvalue() == "b info shown\n"


# =============================================================================
# Concurrency
# =============================================================================

@pytest.mark.threaded
class TestConcurrentGet:

    def test_racing_gets_create_one_instance(self, registry):
        n = 16
        barrier = threading.Barrier(n)
        results = [None] * n

        def worker(i):
            barrier.wait()
            results[i] = registry.get("shared")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r is results[0] for r in results)
        assert registry.names().count("shared") == 1


class _SpawningSink:
    """A destination that creates a logger from inside write()."""

    def __init__(self, registry, parent_name):
        self.registry = registry
        self.parent_name = parent_name
        self.lines = []

    def write(self, s):
        self.lines.append(s)
        self.registry.get("spawned", self.registry.get(self.parent_name))


class TestLockOrder:
    """A write() that calls get() must not deadlock on the writer lock."""

    def test_get_from_inside_write(self, registry):
        lg = registry.get("host")
        sink = _SpawningSink(registry, "host")
        lg.set_output(sink)

        t = threading.Thread(target=lg.info, args=("hello",), daemon=True)
        t.start()
        t.join(timeout=5)

        assert not t.is_alive(), "emission deadlocked"
        assert "spawned" in registry
        assert registry.get("spawned").get_output() is sink
        assert sink.lines[0].endswith("info hello\n")

    def test_concurrent_get_while_writing(self, registry):
        """One thread logs through a spawning sink while others copy from it."""
        lg = registry.get("host")
        lg.set_output(_SpawningSink(registry, "host"))
        errors = []

        def emitter():
            for _ in range(50):
                lg.info("tick")

        def getter(i):
            try:
                for j in range(50):
                    registry.get(f"copy-{i}-{j}", lg)
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=emitter, daemon=True)]
        threads += [threading.Thread(target=getter, args=(i,), daemon=True) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert not any(t.is_alive() for t in threads), "deadlock between registry and writer locks"
        assert errors == []


# =============================================================================
# Module-level singleton
# =============================================================================

@pytest.mark.usefixtures("reset_singleton")
class TestSingleton:

    def test_init_logging_installs_registry(self, buf):
        reg = init_logging(out=buf, flags=0)
        assert get_registry() is reg
        get_logger("svc").info("hi")
        assert buf.getvalue() == "svc info hi\n"

    def test_get_logger_defaults_to_root(self, buf):
        reg = init_logging(out=buf)
        assert get_logger() is reg.root

    def test_get_logger_identity(self, buf):
        init_logging(out=buf)
        assert get_logger("x") is get_logger("x")

    def test_get_logger_with_parent(self, buf):
        init_logging(out=buf, flags=0)
        parent_buf = io.StringIO()
        parent = get_logger("p")
        parent.set_output(parent_buf)
        get_logger("c", parent).warn("w")
        assert parent_buf.getvalue() == "c warn w\n"

    def test_lazy_default_registry(self):
        _registry_mod._registry = None
        reg = get_registry()
        assert reg is get_registry()
        assert reg.root.get_flags() == DEFAULT_FLAGS

    def test_reinit_replaces_registry(self, buf):
        first = init_logging(out=buf)
        old = get_logger("svc")
        old.set_level(INFO)
        second = init_logging(out=buf)
        assert second is not first
        assert get_logger("svc") is not old
        assert get_logger("svc").get_level() is TRACE
