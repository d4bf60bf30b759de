"""Error types raised by the service registry.

All errors derive from `RegistryError` so callers can catch registry
failures in one place. `InvalidRegistrationError` and `ServiceNotFoundError`
also derive from the builtin they correspond to (`TypeError`, `KeyError`)
so existing `except KeyError` call sites keep working.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple, Union


class RegistryError(Exception):
    """Base class for every error raised by the registry."""

    def __init__(self, message: str, service_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.service_id = service_id

    def __str__(self) -> str:
        return self.message


class InvalidRegistrationError(RegistryError, TypeError):
    """Raised by `set` when the resolver cannot be bound."""


class ServiceNotFoundError(RegistryError, KeyError):
    """Raised by `get` when no binding exists for the key."""

    def __init__(self, service_id: str):
        super().__init__(f"service '{service_id}' not found", service_id)


class ResolutionError(RegistryError):
    """Raised by `get` when producing the service failed.

    The original exception is available as `__cause__`.
    """

    def __init__(self, service_id: str, message: Optional[str] = None):
        super().__init__(message or f"error resolving service '{service_id}'", service_id)


def type_name(expected: Union[type, Tuple[type, ...]]) -> str:
    """Readable name for a type or a tuple of types as accepted by isinstance."""
    if isinstance(expected, tuple):
        return " | ".join(type_name(t) for t in expected)
    return getattr(expected, "__qualname__", repr(expected))


class ServiceTypeError(ResolutionError):
    """Resolved service is not an instance of the requested type."""

    def __init__(self, service_id: str, expected: Union[type, Tuple[type, ...]], actual: object):
        self.expected = expected
        self.actual = type(actual)
        super().__init__(
            service_id,
            f"service '{service_id}' is {self.actual.__qualname__}, expected {type_name(expected)}",
        )


class CyclicResolutionError(ResolutionError):
    """A factory requested a service that is still being resolved."""

    def __init__(self, service_id: str, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__(
            service_id,
            f"cyclic resolution of service '{service_id}': {' -> '.join(self.chain)}",
        )
