"""GraphQL schema for roles."""

from rolestore.interfaces.graphql.context import GraphQLContext
from rolestore.interfaces.graphql.schema import create_schema

__all__ = [
    "GraphQLContext",
    "create_schema",
]
