from typing import Protocol, Any, List, Type, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ServiceLookupProtocol(Protocol):
    """Read-only view of a registry handed to factories.

    Factories may resolve their dependencies through this surface but
    cannot register or remove bindings while a resolution is running.
    """

    def get(self, service_id: str) -> Any: ...

    def get_typed(self, service_id: str, expected_type: Type[T]) -> T: ...

    def has(self, service_id: str) -> bool: ...


@runtime_checkable
class ServiceRegistryProtocol(ServiceLookupProtocol, Protocol):
    """Full registry surface implemented by `ServiceRegistry` and
    `SynchronizedRegistry`."""

    def set(self, service_id: str, resolver: Any) -> None: ...

    def unset(self, service_id: str) -> None: ...

    def reset(self) -> None: ...

    def is_resolved(self, service_id: str) -> bool: ...

    def keys(self) -> List[str]: ...
