"""
LineWriter — the delegate line writer each Logger wraps.

A LineWriter owns three pieces of state: a destination, a prefix, and a
set of formatting flags. Each call to write_line() renders one header
(prefix, date, time, caller location) in front of the message, terminates
it with a newline, and writes the whole line with a single write() call.

Header layout (each part independently toggleable):

    <prefix><YYYY/MM/DD> <HH:MM:SS[.uuuuuu]> <file>:<line>: <message>

With Flag.MSGPREFIX the prefix moves to just before the message:

    <YYYY/MM/DD> <HH:MM:SS[.uuuuuu]> <file>:<line>: <prefix><message>

All state is guarded by a per-writer lock, so swapping the destination
or flags never races an in-flight write, and two concurrent lines never
interleave their characters.
"""

import io
import os
import sys
import threading
from datetime import datetime, timezone
from enum import IntFlag
from typing import Any, Optional


class Flag(IntFlag):
    """Formatting options for the line header."""

    DATE = 1            # 2009/01/23
    TIME = 2            # 01:23:23
    MICROSECONDS = 4    # 01:23:23.123123, implies TIME
    LONGFILE = 8        # /a/b/c/module.py:23
    SHORTFILE = 16      # module.py:23, overrides LONGFILE
    UTC = 32            # use UTC rather than local time
    MSGPREFIX = 64      # put the prefix before the message, not the header
    STD = DATE | TIME


DEFAULT_FLAGS = Flag.DATE | Flag.TIME | Flag.MICROSECONDS | Flag.SHORTFILE


def _is_binary(out: Any) -> bool:
    """True when the destination expects bytes rather than str.

    Covers the io binary classes and file-likes that only advertise a
    binary mode, such as tempfile.SpooledTemporaryFile(mode="w+b").
    """
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(out, "mode", None)
    return isinstance(mode, str) and "b" in mode


class LineWriter:
    """Prefix + flags + destination line writer.

    Usage::

        w = LineWriter(sys.stderr, prefix="svc ", flags=Flag.STD)
        w.write_line(1, "hello")      # svc 2026/10/19 12:00:00 hello
    """

    def __init__(self, out: Any = None, prefix: str = "", flags: int = Flag.STD):
        # Reentrant: a destination may log (or create loggers) from write().
        self._lock = threading.RLock()
        self._out = out if out is not None else sys.stderr
        self._prefix = prefix
        self._flags = Flag(flags)

    # -- configuration -----------------------------------------------------

    @property
    def output(self) -> Any:
        """Current destination."""
        with self._lock:
            return self._out

    def set_output(self, out: Any) -> None:
        """Change the destination; None means sys.stderr."""
        with self._lock:
            self._out = out if out is not None else sys.stderr

    @property
    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    @property
    def flags(self) -> Flag:
        with self._lock:
            return self._flags

    def set_flags(self, flags: int) -> None:
        with self._lock:
            self._flags = Flag(flags)

    # -- rendering ---------------------------------------------------------

    @staticmethod
    def format_header(prefix: str, flags: Flag, when: datetime,
                      filename: Optional[str] = None, lineno: int = 0) -> str:
        """Render the header that precedes a message.

        Args:
            prefix: Writer prefix (placed first unless MSGPREFIX is set)
            flags: Formatting flags
            when: Timestamp of the line
            filename: Caller's source file, used with SHORTFILE/LONGFILE
            lineno: Caller's line number

        Returns:
            Header text, possibly empty.
        """
        parts = []
        if not flags & Flag.MSGPREFIX:
            parts.append(prefix)
        if flags & (Flag.DATE | Flag.TIME | Flag.MICROSECONDS):
            if flags & Flag.DATE:
                parts.append(when.strftime("%Y/%m/%d "))
            if flags & (Flag.TIME | Flag.MICROSECONDS):
                parts.append(when.strftime("%H:%M:%S"))
                if flags & Flag.MICROSECONDS:
                    parts.append(f".{when.microsecond:06d}")
                parts.append(" ")
        if flags & (Flag.SHORTFILE | Flag.LONGFILE):
            if filename is None:
                filename, lineno = "???", 0
            elif flags & Flag.SHORTFILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        if flags & Flag.MSGPREFIX:
            parts.append(prefix)
        return "".join(parts)

    def write_line(self, calldepth: int, text: str) -> None:
        """Write one formatted line to the destination.

        Args:
            calldepth: Number of frames between this method and the frame
                reported by SHORTFILE/LONGFILE; 1 is the direct caller.
            text: Message body. A trailing newline is added if missing.

        Raises:
            Whatever the destination's write() raises (OSError, ValueError,
            TypeError for a sink that rejects the data type, ...).
        """
        now = datetime.now(timezone.utc)

        # Caller lookup happens outside the lock.
        flags = self.flags
        filename, lineno = None, 0
        if flags & (Flag.SHORTFILE | Flag.LONGFILE):
            try:
                frame = sys._getframe(calldepth)
            except ValueError:
                frame = None
            if frame is not None:
                filename, lineno = frame.f_code.co_filename, frame.f_lineno

        if not text.endswith("\n"):
            text += "\n"

        with self._lock:
            flags = self._flags
            when = now if flags & Flag.UTC else now.astimezone()
            line = self.format_header(self._prefix, flags, when, filename, lineno) + text
            out = self._out
            if _is_binary(out):
                out.write(line.encode("utf-8"))
            else:
                out.write(line)
