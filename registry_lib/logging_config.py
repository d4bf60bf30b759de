from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Any, Optional

from registry_lib.config.config import RegistryConfig

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def level_from_name(name: Any) -> int:
    """Map a level name such as 'debug' to its numeric level, else WARNING."""
    if isinstance(name, str):
        _numeric = getattr(logging, name.upper(), None)
        if isinstance(_numeric, int):
            return _numeric
    return logging.WARNING


def read_log_level(config_path: Optional[Path]) -> int:
    """Return the numeric level named by `log_level` in a YAML config file.

    Falls back to WARNING when the file is missing, unreadable, or names
    an unknown level.
    """
    if config_path is None or not config_path.exists():
        return logging.WARNING
    try:
        with config_path.open('r', encoding='utf-8') as _f:
            _cfg = yaml.safe_load(_f) or {}
    except (OSError, yaml.YAMLError):
        logging.getLogger(__name__).warning('Failed to read logging config from %s', config_path)
        return logging.WARNING
    return level_from_name(_cfg.get('log_level') if isinstance(_cfg, dict) else None)


def configure_logging(config_path: Optional[Path] = None, config: Optional[RegistryConfig] = None) -> logging.Logger:
    """Configure root logging for an application using the registry.

    The level comes from `config.log_level` when a loaded RegistryConfig is
    given, otherwise from the `log_level` key of the YAML file at
    `config_path`. Replaces any existing root handlers with one using
    LOG_FORMAT and returns the `registry_lib` logger.
    """
    if config is not None:
        level = level_from_name(config.log_level)
    else:
        level = read_log_level(config_path)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger('registry_lib')
    logger.debug('Log level set to: %s', logging.getLevelName(level))
    return logger
