"""Thread-safe wrapper around `ServiceRegistry`."""
from threading import RLock
from typing import Any, Callable, List, Optional, Type, TypeVar

from .container import ServiceRegistry

T = TypeVar("T")


class SynchronizedRegistry:
    """Guard every registry operation with one reentrant lock.

    Holding the lock across `get` makes the check-resolve-cache sequence
    atomic: concurrent callers of the same key see a single factory
    invocation and the same instance. The lock is reentrant because
    factories resolve their dependencies from inside `get`.
    """

    def __init__(self, registry: Optional[ServiceRegistry] = None):
        self._lock = RLock()
        self._registry = registry if registry is not None else ServiceRegistry()

    def set(self, service_id: str, resolver: Any) -> None:
        with self._lock:
            self._registry.set(service_id, resolver)

    def register_singleton(self, service_id: str, instance: Any) -> None:
        with self._lock:
            self._registry.register_singleton(service_id, instance)

    def register_factory(self, service_id: str, factory: Callable[..., Any]) -> None:
        with self._lock:
            self._registry.register_factory(service_id, factory)

    def get(self, service_id: str) -> Any:
        with self._lock:
            return self._registry.get(service_id)

    def get_typed(self, service_id: str, expected_type: Type[T]) -> T:
        with self._lock:
            return self._registry.get_typed(service_id, expected_type)

    def has(self, service_id: str) -> bool:
        with self._lock:
            return self._registry.has(service_id)

    def is_resolved(self, service_id: str) -> bool:
        with self._lock:
            return self._registry.is_resolved(service_id)

    def unset(self, service_id: str) -> None:
        with self._lock:
            self._registry.unset(service_id)

    def reset(self) -> None:
        with self._lock:
            self._registry.reset()

    def keys(self) -> List[str]:
        with self._lock:
            return self._registry.keys()

    def __contains__(self, service_id: object) -> bool:
        with self._lock:
            return service_id in self._registry

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)
