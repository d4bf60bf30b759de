"""registry_lib: a small dependency-injection registry."""

from registry_lib.services import (
    CyclicResolutionError,
    Factory,
    InvalidRegistrationError,
    RegistryError,
    RegistryLookup,
    ResolutionError,
    ServiceNotFoundError,
    ServiceRegistry,
    ServiceTypeError,
    SynchronizedRegistry,
    Value,
)

__all__ = [
    "ServiceRegistry",
    "SynchronizedRegistry",
    "RegistryLookup",
    "Factory",
    "Value",
    "RegistryError",
    "InvalidRegistrationError",
    "ServiceNotFoundError",
    "ResolutionError",
    "ServiceTypeError",
    "CyclicResolutionError",
]
