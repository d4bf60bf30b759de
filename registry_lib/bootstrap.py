"""Bootstrap helpers composing a registry from configuration.

Keeps application entrypoints focused on registering their own factories;
the literal values from the config file are bound here.
"""
import logging
from typing import Optional, Union

from registry_lib.config.config import RegistryConfig
from registry_lib.services.bindings import Value
from registry_lib.services.container import ServiceRegistry
from registry_lib.services.locking import SynchronizedRegistry

logger = logging.getLogger(__name__)


def build_registry(config: Optional[RegistryConfig] = None) -> Union[ServiceRegistry, SynchronizedRegistry]:
    """Return a registry with `config.values` bound as literal services.

    Values are wrapped in `Value` so plain scalars from YAML (numbers,
    booleans, null) are accepted. A `SynchronizedRegistry` is returned when
    `config.thread_safe` is set.
    """
    cfg = config or RegistryConfig()
    registry = SynchronizedRegistry() if cfg.thread_safe else ServiceRegistry()
    for key, value in cfg.values.items():
        registry.set(key, Value(value))
    logger.info("Built registry with %d configured value(s)", len(cfg.values))
    return registry
