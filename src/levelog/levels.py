"""
Severity levels for levelog.

Six ordered levels. The emit rule is simple:

    message.level >= logger.threshold  →  message is shown

There is no upper bound: a threshold only ever suppresses the levels
below it, never the ones above.

Level assignments:
    ←── chattier ──────────────────────── quieter ──→
     0      1      2     3     4      5
    trace  debug  info  warn  error  critical
"""

from enum import IntEnum
from typing import Union


class Severity(IntEnum):
    """Ordered severity levels. Comparison is by rank."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def tag(self) -> str:
        """Lowercase level word plus a single space, e.g. ``'trace '``."""
        return self.name.lower() + " "


# Module-level aliases for `from levelog.levels import INFO` style use
TRACE = Severity.TRACE
DEBUG = Severity.DEBUG
INFO = Severity.INFO
WARN = Severity.WARN
ERROR = Severity.ERROR
CRITICAL = Severity.CRITICAL

# Extra spellings accepted by parse_level()
_ALIASES = {
    'warning': Severity.WARN,
}

LEVEL_DESCRIPTIONS = {
    Severity.TRACE:    'Fine-grained flow tracing',
    Severity.DEBUG:    'Internal state useful while debugging',
    Severity.INFO:     'Normal operational messages',
    Severity.WARN:     'Unexpected but recoverable conditions',
    Severity.ERROR:    'Failed operations',
    Severity.CRITICAL: 'Failures that endanger the process',
}


def parse_level(value: Union[Severity, int, str]) -> Severity:
    """Coerce a Severity, integer rank, or level name into a Severity.

    Names are case-insensitive; 'warning' is accepted as
    an alias for WARN. Digit strings are treated as ranks.

    Raises:
        ValueError: unknown name or out-of-range rank.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key.lstrip('-').isdigit():
            return Severity(int(key))
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return Severity[key.upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {value!r}") from None
    return Severity(value)


def format_level_list() -> str:
    """Format the levels, lowest rank first, for display."""
    lines = ["Available levels:"]
    width = max(len(lvl.name) for lvl in Severity)
    for lvl in Severity:
        lines.append(f"  {lvl.name.lower():<{width}}  {lvl.value}  {LEVEL_DESCRIPTIONS[lvl]}")
    return "\n".join(lines)
