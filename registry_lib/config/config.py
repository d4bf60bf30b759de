"""YAML-backed registry configuration.

A config file looks like::

    log_level: INFO
    thread_safe: false
    values:
      app_name: planner
      feature_flags: {beta: true}

`values` are registered as literal services by `build_registry`.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class RegistryConfig:
    log_level: str = "WARNING"
    thread_safe: bool = False
    values: Dict[str, Any] = field(default_factory=dict)


class YamlConfigStore:
    """Serialize/deserialize RegistryConfig to a YAML file.

    A missing file loads as the default config. A document that is not a
    mapping, or whose `values` is not a mapping, raises ValueError.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, cfg: RegistryConfig) -> None:
        payload = yaml.safe_dump(asdict(cfg), sort_keys=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")

    def load(self) -> RegistryConfig:
        if not self.path.exists():
            logger.info("Registry config %s missing; using defaults", self.path)
            return RegistryConfig()
        raw = self.path.read_text(encoding="utf-8")
        try:
            data: Any = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError("invalid config format: parse error") from e
        if data is None:
            return RegistryConfig()
        if not isinstance(data, dict):
            raise ValueError("invalid config format: expected mapping")

        values = data.get("values") or {}
        if not isinstance(values, dict):
            raise ValueError("invalid config format: 'values' must be a mapping")

        thread_safe = data.get("thread_safe", False)
        if not isinstance(thread_safe, bool):
            raise ValueError("invalid config format: 'thread_safe' must be true or false")

        return RegistryConfig(
            log_level=str(data.get("log_level", "WARNING")),
            thread_safe=thread_safe,
            values={str(k): v for k, v in values.items()},
        )
