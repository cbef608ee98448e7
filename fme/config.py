# python
"""
fme/config.py
Default configuration and FME_* environment overrides.
"""
import copy
import logging
import os
from typing import Any, Dict, Optional, Mapping

from .env import load_env

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {"level": "WARNING"},
    "output": {"format": "tree"},
    "exit": {"legacy": False},
    "paths": {"events_file": None},
}

OUTPUT_FORMATS = ("tree", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Return a copy of DEFAULT_CONFIG with FME_* environment variables applied.

    Recognised variables: FME_LOG_LEVEL, FME_OUTPUT_FORMAT, FME_LEGACY_EXIT,
    FME_EVENTS_FILE. Unknown output formats are ignored with a warning.
    """
    if environ is None:
        load_env()
        environ = os.environ
    config = copy.deepcopy(DEFAULT_CONFIG)

    level = environ.get("FME_LOG_LEVEL")
    if level:
        config["logging"]["level"] = level.strip().upper()

    fmt = environ.get("FME_OUTPUT_FORMAT")
    if fmt:
        fmt = fmt.strip().lower()
        if fmt in OUTPUT_FORMATS:
            config["output"]["format"] = fmt
        else:
            logger.warning("Ignoring unknown FME_OUTPUT_FORMAT %r", fmt)

    legacy = environ.get("FME_LEGACY_EXIT")
    if legacy is not None:
        config["exit"]["legacy"] = _env_flag(legacy)

    events_file = environ.get("FME_EVENTS_FILE")
    if events_file:
        config["paths"]["events_file"] = events_file

    return config
