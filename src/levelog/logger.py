"""
Logger — a named, level-gated front end to a LineWriter.

Each Logger holds a name, a threshold, and a delegate LineWriter. Every
emit method follows the same rule:

    emit iff level >= threshold

then renders the message body (level tag + message) and hands it to the
delegate, which adds the header and writes the line.

Two entry points exist per level:

    log.info("loaded", 42, "items")      # plain: space-joined str() of args
    log.infof("loaded %d items", 42)     # formatted: printf-style % substitution

Emission is best-effort. A failing destination (closed file, broken
pipe), a bad format string, or an argument whose str() raises never
raises out of an emit call.
"""

from collections.abc import Mapping
from typing import Any, Union

from .levels import Severity, parse_level
from .writer import Flag, LineWriter

# Frames between LineWriter.write_line() and the user's call site:
# write_line <- _emit <- info/infof/... <- caller
_CALLDEPTH = 3


def _describe(value: Any) -> str:
    """repr() that cannot fail; falls back to the type name."""
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _failure(e: Exception) -> str:
    return f"{type(e).__name__}: {_describe(e.args)}"


def _sprint(args: tuple) -> str:
    try:
        return " ".join(str(a) for a in args)
    except Exception as e:
        return f"%!(BADVALUE {_failure(e)}: {' '.join(_describe(a) for a in args)})"


def _sprintf(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except Exception as e:
        if isinstance(args, Mapping):
            shown = _describe(args)
        else:
            shown = ", ".join(_describe(a) for a in args)
        return f"{fmt} %!(BADFORMAT {_failure(e)}: {shown})"


class Logger:
    """Named logger with a minimum severity threshold.

    Loggers are normally obtained from a Registry (see registry.get_logger)
    so that every holder of a name shares one instance. All setters mutate
    that shared instance in place.
    """

    def __init__(self, name: str, writer: LineWriter,
                 level: Union[Severity, int, str] = Severity.TRACE):
        self._name = name
        self._writer = writer
        self._level = parse_level(level)

    def __repr__(self) -> str:
        return f"<Logger {self._name!r} level={self._level.name}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def writer(self) -> LineWriter:
        """The delegate LineWriter."""
        return self._writer

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_level(self, level: Union[Severity, int, str]) -> None:
        """Set the threshold. Every level at or above it is emitted."""
        self._level = parse_level(level)

    def get_level(self) -> Severity:
        return self._level

    def set_output(self, out: Any) -> None:
        """Change the destination for subsequent emissions."""
        self._writer.set_output(out)

    def get_output(self) -> Any:
        return self._writer.output

    def set_flags(self, flags: int) -> None:
        """Change the delegate's header flags (see writer.Flag)."""
        self._writer.set_flags(flags)

    def get_flags(self) -> Flag:
        return self._writer.flags

    def is_enabled_for(self, level: Union[Severity, int, str]) -> bool:
        """True if a message at `level` would be emitted."""
        return parse_level(level) >= self._level

    # =========================================================================
    # Emission
    # =========================================================================

    def _emit(self, level: Severity, body: str) -> None:
        try:
            self._writer.write_line(_CALLDEPTH, level.tag + body)
        except Exception:
            # Best-effort: write failures are not reported to callers.
            pass

    def log(self, level: Union[Severity, int, str], *args: Any) -> None:
        """Emit at an arbitrary level, plain form."""
        level = parse_level(level)
        if level >= self._level:
            self._emit(level, _sprint(args))

    def logf(self, level: Union[Severity, int, str], fmt: str, *args: Any) -> None:
        """Emit at an arbitrary level, formatted form."""
        level = parse_level(level)
        if level >= self._level:
            self._emit(level, _sprintf(fmt, args))

    def trace(self, *args: Any) -> None:
        """Emit at TRACE level."""
        if Severity.TRACE >= self._level:
            self._emit(Severity.TRACE, _sprint(args))

    def debug(self, *args: Any) -> None:
        """Emit at DEBUG level."""
        if Severity.DEBUG >= self._level:
            self._emit(Severity.DEBUG, _sprint(args))

    def info(self, *args: Any) -> None:
        """Emit at INFO level."""
        if Severity.INFO >= self._level:
            self._emit(Severity.INFO, _sprint(args))

    def warn(self, *args: Any) -> None:
        """Emit at WARN level."""
        if Severity.WARN >= self._level:
            self._emit(Severity.WARN, _sprint(args))

    def error(self, *args: Any) -> None:
        """Emit at ERROR level."""
        if Severity.ERROR >= self._level:
            self._emit(Severity.ERROR, _sprint(args))

    def critical(self, *args: Any) -> None:
        """Emit at CRITICAL level."""
        if Severity.CRITICAL >= self._level:
            self._emit(Severity.CRITICAL, _sprint(args))

    def tracef(self, fmt: str, *args: Any) -> None:
        """Emit at TRACE level with a printf-style format string."""
        if Severity.TRACE >= self._level:
            self._emit(Severity.TRACE, _sprintf(fmt, args))

    def debugf(self, fmt: str, *args: Any) -> None:
        """Emit at DEBUG level with a printf-style format string."""
        if Severity.DEBUG >= self._level:
            self._emit(Severity.DEBUG, _sprintf(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        """Emit at INFO level with a printf-style format string."""
        if Severity.INFO >= self._level:
            self._emit(Severity.INFO, _sprintf(fmt, args))

    def warnf(self, fmt: str, *args: Any) -> None:
        """Emit at WARN level with a printf-style format string."""
        if Severity.WARN >= self._level:
            self._emit(Severity.WARN, _sprintf(fmt, args))

    def errorf(self, fmt: str, *args: Any) -> None:
        """Emit at ERROR level with a printf-style format string."""
        if Severity.ERROR >= self._level:
            self._emit(Severity.ERROR, _sprintf(fmt, args))

    def criticalf(self, fmt: str, *args: Any) -> None:
        """Emit at CRITICAL level with a printf-style format string."""
        if Severity.CRITICAL >= self._level:
            self._emit(Severity.CRITICAL, _sprintf(fmt, args))
