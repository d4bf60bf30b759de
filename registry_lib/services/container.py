import logging
from typing import Any, Callable, Dict, List, Type, TypeVar

from .bindings import Binding, Factory, Value, binding_for
from .errors import (
    CyclicResolutionError,
    InvalidRegistrationError,
    ResolutionError,
    ServiceNotFoundError,
    ServiceTypeError,
)
from .lookup import RegistryLookup

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceRegistry:
    """A tiny, explicit DI registry mapping string keys to lazily-resolved services.

    Register a factory or a value with `set` and resolve via `get`.
    Factories are evaluated once and their result cached until the key is
    re-registered, removed, or the registry is reset. A factory that takes
    one argument receives a read-only `RegistryLookup` so it can pull its
    own dependencies by key.

    Not thread-safe; wrap in `SynchronizedRegistry` for concurrent use.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._instances: Dict[str, Any] = {}
        self._resolving: List[str] = []
        self._lookup = RegistryLookup(self)

    def set(self, service_id: str, resolver: Any) -> None:
        if not isinstance(service_id, str):
            raise InvalidRegistrationError(
                f"service id must be a string, got {type(service_id).__qualname__}"
            )
        binding = binding_for(service_id, resolver)
        if service_id in self._bindings:
            logger.debug("Rebinding service '%s'", service_id)
        self._instances.pop(service_id, None)
        self._bindings[service_id] = binding
        logger.debug("Registered %s for service '%s'", type(binding).__name__.lower(), service_id)

    def register_singleton(self, service_id: str, instance: Any) -> None:
        self.set(service_id, Value(instance))

    def register_factory(self, service_id: str, factory: Callable[..., Any]) -> None:
        self.set(service_id, Factory(factory))

    def get(self, service_id: str) -> Any:
        if service_id in self._instances:
            return self._instances[service_id]

        binding = self._bindings.get(service_id)
        if binding is None:
            raise ServiceNotFoundError(service_id)

        if service_id in self._resolving:
            raise CyclicResolutionError(service_id, [*self._resolving, service_id])

        self._resolving.append(service_id)
        try:
            instance = binding(self._lookup)
        except CyclicResolutionError:
            raise
        except Exception as e:
            logger.warning("Failed to resolve service '%s': %s", service_id, e)
            raise ResolutionError(service_id) from e
        finally:
            self._resolving.pop()

        # the factory may have rebound or removed its own key while it ran
        if self._bindings.get(service_id) is not binding:
            logger.debug("Binding for service '%s' changed during resolution; not caching", service_id)
            return instance

        self._instances[service_id] = instance
        logger.debug("Resolved service '%s'", service_id)
        return instance

    def get_typed(self, service_id: str, expected_type: Type[T]) -> T:
        """Resolve and check the service is an instance of `expected_type`."""
        instance = self.get(service_id)
        if not isinstance(instance, expected_type):
            raise ServiceTypeError(service_id, expected_type, instance)
        return instance

    def has(self, service_id: str) -> bool:
        return service_id in self._bindings

    def is_resolved(self, service_id: str) -> bool:
        return service_id in self._instances

    def unset(self, service_id: str) -> None:
        self._bindings.pop(service_id, None)
        self._instances.pop(service_id, None)

    def reset(self) -> None:
        self._bindings.clear()
        self._instances.clear()

    def keys(self) -> List[str]:
        return sorted(self._bindings)

    def __contains__(self, service_id: object) -> bool:
        return isinstance(service_id, str) and service_id in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"<ServiceRegistry bindings={len(self._bindings)} resolved={len(self._instances)}>"
