"""
Registry — the name → Logger store, and its process-wide singleton.

There is no hierarchy between loggers. A parent is consulted exactly
once, when a new name is first requested, to copy its current
destination and flags into the new logger's writer. After that the two
are fully independent.

The root logger (name "") exists from the moment a Registry is built and
is never removed. Named loggers are created on first request and live as
long as the registry does.

Usage::

    reg = Registry(out=buf)
    svc = reg.get("svc")
    svc.set_level(INFO)
    assert reg.get("svc") is svc

Or through the module-level singleton::

    init_logging()                # once, at program start (optional)
    log = get_logger("svc")
"""

import threading
from typing import Any, Dict, List, Optional

from .levels import Severity
from .logger import Logger
from .writer import DEFAULT_FLAGS, LineWriter

ROOT_NAME = ""


class Registry:
    """Thread-safe name → Logger mapping with a root logger."""

    def __init__(self, out: Any = None, flags: int = DEFAULT_FLAGS):
        self._lock = threading.Lock()
        self._root = Logger(ROOT_NAME, LineWriter(out, prefix="", flags=flags))
        self._loggers: Dict[str, Logger] = {ROOT_NAME: self._root}

    @property
    def root(self) -> Logger:
        return self._root

    def get(self, name: str, parent: Optional[Logger] = None) -> Logger:
        """Return the logger for `name`, creating it on first request.

        An existing logger is returned unchanged and `parent` is ignored.
        A new logger starts at TRACE with a writer that copies the current
        destination and flags of `parent`, or of the root if no parent is
        given. The empty name always yields the root.

        Args:
            name: Logger name (any string; no dotted hierarchy is implied)
            parent: Logger to copy destination and flags from

        Returns:
            The shared Logger instance for `name`.
        """
        # Lock order: a writer lock is never taken while holding the
        # registry lock, so the source is snapshotted first.
        source = (parent if parent is not None else self._root).writer
        out, flags = source.output, source.flags

        with self._lock:
            logger = self._loggers.get(name)
            if logger is not None:
                return logger

            writer = LineWriter(out, prefix=name + " ", flags=flags)
            logger = Logger(name, writer, Severity.TRACE)
            self._loggers[name] = logger
            return logger

    def names(self) -> List[str]:
        """Sorted names of every registered logger, root included."""
        with self._lock:
            return sorted(self._loggers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)


# =============================================================================
# Module-level singleton
# =============================================================================

_registry: Optional[Registry] = None
_registry_lock = threading.Lock()


def init_logging(out: Any = None, flags: int = DEFAULT_FLAGS) -> Registry:
    """Install a fresh process-wide Registry.

    Call once at program startup if the defaults (stderr, DEFAULT_FLAGS)
    are not wanted. Calling it again replaces the registry; loggers
    obtained from the old one keep working but are no longer shared.

    Args:
        out: Root destination (default: sys.stderr)
        flags: Root header flags

    Returns:
        The installed Registry.
    """
    global _registry
    with _registry_lock:
        _registry = Registry(out=out, flags=flags)
        return _registry


def get_registry() -> Registry:
    """Get the process-wide Registry, creating a default one if needed."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = Registry()
        return _registry


def get_logger(name: str = ROOT_NAME, parent: Optional[Logger] = None) -> Logger:
    """Return the shared Logger for `name` from the process-wide Registry."""
    return get_registry().get(name, parent)
