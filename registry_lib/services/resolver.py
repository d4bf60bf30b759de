import logging
from typing import Any
from fastapi import HTTPException
from starlette.requests import Request

from .errors import ResolutionError, ServiceNotFoundError

logger = logging.getLogger(__name__)


def resolve_service(request: Request, name: str) -> Any:
    """Resolve a named service from the application's service registry.

    Requires `app.state.container` to hold a registry with the named
    binding, otherwise an HTTP 500 is raised.
    """
    container = getattr(request.app.state, 'container', None)
    if container is None:
        raise HTTPException(status_code=500, detail="Service container not configured")
    try:
        return container.get(name)
    except ServiceNotFoundError:
        raise HTTPException(status_code=500, detail=f"Service '{name}' not configured")
    except ResolutionError as e:
        logger.error("Service '%s' failed to resolve: %s", name, e.__cause__ or e)
        raise HTTPException(status_code=500, detail=f"Service '{name}' unavailable") from e


def resolve_optional_service(request: Request, name: str) -> Any:
    """Resolve an optional service, returning None if not registered.

    A registered service whose factory fails is still an error.
    """
    container = getattr(request.app.state, 'container', None)
    if container is None:
        return None
    try:
        return container.get(name)
    except ServiceNotFoundError:
        return None
    except ResolutionError as e:
        logger.error("Service '%s' failed to resolve: %s", name, e.__cause__ or e)
        raise HTTPException(status_code=500, detail=f"Service '{name}' unavailable") from e
