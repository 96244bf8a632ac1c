"""levelog — leveled logging facade with a named-logger registry.

Wraps a prefix + flags + destination line writer and adds a severity
threshold (TRACE..CRITICAL) that gates emission.

Public API:
    get_logger       — shared Logger by name from the process-wide registry
    init_logging     — install a fresh process-wide registry
    get_registry     — access the process-wide registry
    Registry         — name → Logger store (build your own in tests)
    Logger           — level-gated logger
    Severity         — ordered levels; TRACE .. CRITICAL aliases
    parse_level      — name/rank → Severity
    LineWriter, Flag — the delegate writer and its header flags
    configure_levels — apply 'name:level' specs
    trace            — function tracing decorator
"""

from levelog._version import __version__, __app_name__
from levelog.levels import (
    Severity, TRACE, DEBUG, INFO, WARN, ERROR, CRITICAL,
    parse_level, format_level_list,
)
from levelog.writer import Flag, LineWriter, DEFAULT_FLAGS
from levelog.logger import Logger
from levelog.registry import Registry, init_logging, get_registry, get_logger
from levelog.config import LevelSpec, parse_level_spec, configure_levels
from levelog.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'Severity', 'TRACE', 'DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL',
    'parse_level', 'format_level_list',
    'Flag', 'LineWriter', 'DEFAULT_FLAGS',
    'Logger',
    'Registry', 'init_logging', 'get_registry', 'get_logger',
    'LevelSpec', 'parse_level_spec', 'configure_levels',
    'trace',
]
