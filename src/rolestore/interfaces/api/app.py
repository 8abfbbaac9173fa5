"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from rolestore.interfaces.api.resources.graphql import GraphQLResource
from rolestore.interfaces.api.resources.health import HealthResource

logger = structlog.get_logger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.error(
        "request_failed",
        method=req.method,
        path=req.path,
        exc_info=ex,
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    graphql_resource: GraphQLResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/graphql", graphql_resource)
    return app
