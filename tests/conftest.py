"""
Pytest configuration and shared fixtures.

The app is built with `create_app` and an in-memory runtime, so no Docker
daemon is needed.
"""
import pytest
from fastapi.testclient import TestClient

from penpot_stack_controller import create_app
from penpot_stack_controller.services.config import ConfigService
from penpot_stack_controller.services.stack import StackService
from tests.utils import FakeRuntime, make_record


@pytest.fixture
def config() -> ConfigService:
    return ConfigService(compose_file="/tmp/penpot-compose.yaml")


@pytest.fixture
def runtime() -> FakeRuntime:
    """Three stack containers (two running), the controller and a foreign stack."""
    return FakeRuntime(
        [
            make_record("penpot-frontend", "running", ports="9001:8080"),
            make_record("penpot-backend", "running", health="healthy"),
            make_record("penpot-exporter", "exited"),
            make_record("penpot-extension-backend", "running"),
            make_record("other-extension-backend", "running"),
        ]
    )


@pytest.fixture
def empty_runtime() -> FakeRuntime:
    return FakeRuntime([make_record("penpot-extension-backend", "running")])


@pytest.fixture
def stack(config, runtime) -> StackService:
    return StackService(config, runtime)


@pytest.fixture
def api_client(config, runtime):
    """HTTP client for the app backed by the default fake runtime."""
    with TestClient(create_app(config=config, runtime=runtime)) as client:
        yield client
