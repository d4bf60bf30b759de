from typing import Any
from starlette.testclient import TestClient
from registry_lib.services.container import ServiceRegistry


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's registry for tests.

    Creates `app.state.container` when the app has none yet.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'greeter', fake_greeter)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = ServiceRegistry()
        client.app.state.container = container

    container.register_singleton(name, instance)


def register_services_on_client(client: TestClient, services: dict[str, Any]) -> None:
    for name, inst in services.items():
        register_service_on_client(client, name, inst)
