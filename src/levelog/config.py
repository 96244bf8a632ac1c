"""
Programmatic level configuration.

A level spec names a logger and the threshold it should run at:

    NAME:LEVEL

    Examples:
        svc:info        # "svc" at INFO
        db:3            # ranks work too (3 == WARN)
        svc             # no level: TRACE
        :warn           # empty name is the root logger

Specs are plain strings so callers can collect them however they like
(a list in code, an argparse `append` option) and apply them in one go.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .levels import Severity, parse_level
from .logger import Logger
from .registry import Registry, get_registry


@dataclass
class LevelSpec:
    """Threshold assignment for a single named logger."""
    name: str
    level: Severity = Severity.TRACE


def parse_level_spec(spec: str) -> LevelSpec:
    """Parse a NAME[:LEVEL] string into a LevelSpec.

    The level slot is split off the right, so names may contain colons.

    Raises:
        ValueError: the level slot is not a known level name or rank.
    """
    name, sep, level = spec.rpartition(':')
    if not sep:
        return LevelSpec(name=spec.strip())
    if not level.strip():
        return LevelSpec(name=name.strip())
    return LevelSpec(name=name.strip(), level=parse_level(level))


def configure_levels(specs: Iterable[str],
                     registry: Optional[Registry] = None) -> List[Logger]:
    """Apply a list of level specs.

    Every spec is parsed before any logger is touched, so a bad spec
    leaves all thresholds unchanged.

    Args:
        specs: Spec strings like ['svc:info', 'db:warn']
        registry: Registry to configure (default: the process-wide one)

    Returns:
        The configured loggers, in spec order.
    """
    parsed = [parse_level_spec(s) for s in specs]
    reg = registry if registry is not None else get_registry()
    loggers = []
    for cfg in parsed:
        logger = reg.get(cfg.name)
        logger.set_level(cfg.level)
        loggers.append(logger)
    return loggers
