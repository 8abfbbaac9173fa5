"""Application entry point and composition root."""

import argparse

import falcon.asgi
import uvicorn

from rolestore import __version__
from rolestore.application.lookups import PersonLookup, TeamLookup
from rolestore.application.role_store import RoleStore
from rolestore.config import Settings, get_settings
from rolestore.infrastructure.persistence.postgres.connection import create_pool
from rolestore.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from rolestore.interfaces.api.app import create_app
from rolestore.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from rolestore.interfaces.api.resources.graphql import GraphQLResource
from rolestore.interfaces.api.resources.health import HealthResource
from rolestore.interfaces.graphql import GraphQLContext, create_schema
from rolestore.logging_config import configure_logging


def create_rolestore_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
    )
    uow_factory = create_uow_factory(pool)

    context = GraphQLContext(
        store=RoleStore(uow_factory),
        people=PersonLookup(uow_factory),
        teams=TeamLookup(uow_factory),
        date_format=settings.date_format,
    )
    graphql_resource = GraphQLResource(create_schema(), context)

    async def readiness_check() -> bool:
        async with uow_factory() as uow:
            return await uow.ping()

    health_resource = HealthResource(readiness_check)

    return create_app(
        graphql_resource,
        health_resource,
        middleware=[PoolLifespanMiddleware(pool)],
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point - serve the API with uvicorn."""
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="rolestore", description="Role Store API server")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--version", action="version", version=f"rolestore {__version__}")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json=settings.log_json)
    uvicorn.run(
        create_rolestore_app(settings),
        host=args.host,
        port=args.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
