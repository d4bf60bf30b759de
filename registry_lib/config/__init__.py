"""Registry configuration loaded from YAML."""

from .config import RegistryConfig, YamlConfigStore

__all__ = ["RegistryConfig", "YamlConfigStore"]
