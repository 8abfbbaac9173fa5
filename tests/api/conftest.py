"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from rolestore.interfaces.api.app import create_app
from rolestore.interfaces.api.resources.graphql import GraphQLResource
from rolestore.interfaces.api.resources.health import HealthResource
from rolestore.interfaces.graphql import create_schema


@pytest.fixture
def app(graphql_context):
    """Falcon ASGI app over the in-memory store."""
    return create_app(
        GraphQLResource(create_schema(), graphql_context),
        HealthResource(),
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
