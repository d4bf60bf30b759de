"""Binding variants stored by the registry.

A binding is either a `Factory` (invoked once on first lookup) or a
`Value` (returned as-is). `binding_for` decides which one a raw resolver
passed to `ServiceRegistry.set` becomes.
"""
from __future__ import annotations
import inspect
import numbers
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from .errors import InvalidRegistrationError


def _accepts_lookup(fn: Callable[..., Any], service_id: str) -> bool:
    """Return True when `fn` should be called with the lookup handle."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins such as `dict` or `list` without introspectable signatures
        return False

    required = 0
    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            positional += 1
        elif param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind is inspect.Parameter.KEYWORD_ONLY and param.default is inspect.Parameter.empty:
            raise InvalidRegistrationError(
                f"factory for service '{service_id}' has a required keyword-only argument '{param.name}'",
                service_id,
            )
    if required > 1:
        raise InvalidRegistrationError(
            f"factory for service '{service_id}' requires {required} arguments; at most one is supported",
            service_id,
        )
    return positional > 0


@dataclass(frozen=True)
class Factory:
    """Callable producing the service. Called with zero arguments, or with a
    read-only lookup handle when it accepts one."""

    fn: Callable[..., Any]
    takes_lookup: Optional[bool] = field(default=None, compare=False)

    def __call__(self, lookup: Any) -> Any:
        if self.takes_lookup:
            return self.fn(lookup)
        return self.fn()


@dataclass(frozen=True)
class Value:
    """Literal service instance."""

    value: Any

    def __call__(self, lookup: Any) -> Any:
        return self.value


Binding = Union[Factory, Value]


def is_scalar(obj: Any) -> bool:
    return obj is None or isinstance(obj, (bool, numbers.Number))


def binding_for(service_id: str, resolver: Any) -> Binding:
    """Classify `resolver` into a `Factory` or `Value` binding.

    Raises `InvalidRegistrationError` for bare scalars (None, bools and
    numbers) and for factories whose signature cannot be satisfied.
    Explicit `Value(...)` wrapping is accepted for any object.
    """
    if isinstance(resolver, Value):
        return resolver
    if isinstance(resolver, Factory):
        fn = resolver.fn
    elif callable(resolver):
        fn = resolver
    elif is_scalar(resolver):
        raise InvalidRegistrationError(
            f"service '{service_id}' must be callable or an object", service_id
        )
    else:
        return Value(resolver)

    if not callable(fn):
        raise InvalidRegistrationError(
            f"factory for service '{service_id}' is not callable", service_id
        )
    if isinstance(resolver, Factory) and resolver.takes_lookup is not None:
        return resolver
    return Factory(fn, takes_lookup=_accepts_lookup(fn, service_id))
