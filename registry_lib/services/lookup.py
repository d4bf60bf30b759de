"""Read-only lookup handle passed to factories."""
from __future__ import annotations
from typing import Any, Type, TypeVar

from .interfaces import ServiceLookupProtocol

T = TypeVar("T")


class RegistryLookup:
    """Expose `get`, `get_typed` and `has` of a registry and nothing else."""

    __slots__ = ("_registry",)

    def __init__(self, registry: ServiceLookupProtocol):
        self._registry = registry

    def get(self, service_id: str) -> Any:
        return self._registry.get(service_id)

    def get_typed(self, service_id: str, expected_type: Type[T]) -> T:
        return self._registry.get_typed(service_id, expected_type)

    def has(self, service_id: str) -> bool:
        return self._registry.has(service_id)

    def __contains__(self, service_id: object) -> bool:
        return isinstance(service_id, str) and self.has(service_id)

    def __repr__(self) -> str:
        return f"RegistryLookup({self._registry!r})"
