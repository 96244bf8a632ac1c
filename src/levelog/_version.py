"""
Version information for levelog.

This file is the canonical source for version numbers; setup.py reads
PIP_VERSION from here.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.1.0-beta
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "levelog"


def get_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    0.1.0-alpha -> 0.1.0a0, 0.1.0-beta -> 0.1.0b0, 0.1.0-rc1 -> 0.1.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_version()
PIP_VERSION = get_pip_version()
