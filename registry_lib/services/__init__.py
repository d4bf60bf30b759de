"""Services package: the registry, its binding variants and errors."""
from .bindings import Factory, Value
from .container import ServiceRegistry
from .errors import (
    CyclicResolutionError,
    InvalidRegistrationError,
    RegistryError,
    ResolutionError,
    ServiceNotFoundError,
    ServiceTypeError,
)
from .interfaces import ServiceLookupProtocol, ServiceRegistryProtocol
from .locking import SynchronizedRegistry
from .lookup import RegistryLookup

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
    "ServiceLookupProtocol",
    "ServiceRegistryProtocol",
]
