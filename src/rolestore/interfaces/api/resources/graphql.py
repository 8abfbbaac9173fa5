"""GraphQL endpoint."""

import falcon
import falcon.asgi
import strawberry
from graphql import GraphQLError

from rolestore.domain.exceptions import NotFound, StoreError, ValidationError
from rolestore.interfaces.graphql import GraphQLContext


def _error_code(error: GraphQLError) -> str | None:
    original = error.original_error
    if isinstance(original, NotFound):
        return "NOT_FOUND"
    if isinstance(original, ValidationError):
        return "BAD_USER_INPUT"
    if isinstance(original, StoreError):
        return "STORE_ERROR"
    return None


def _format_error(error: GraphQLError) -> dict:
    formatted = dict(error.formatted)
    code = _error_code(error)
    if code:
        formatted["extensions"] = {**formatted.get("extensions", {}), "code": code}
    return formatted


class GraphQLResource:
    """POST /v1/graphql - execute a GraphQL operation."""

    def __init__(self, schema: strawberry.Schema, context: GraphQLContext) -> None:
        self._schema = schema
        self._context = context

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute query/mutation from a JSON body."""
        try:
            body = await req.get_media()
            query = body["query"]
            variables = body.get("variables")
            operation_name = body.get("operationName")
            if not isinstance(query, str) or not query.strip():
                raise ValueError("query must be a non-empty string")
            if variables is not None and not isinstance(variables, dict):
                raise ValueError("variables must be an object")
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        result = await self._schema.execute(
            query,
            variable_values=variables,
            context_value=self._context,
            operation_name=operation_name,
        )
        payload: dict = {"data": result.data}
        if result.errors:
            payload["errors"] = [_format_error(e) for e in result.errors]
        resp.media = payload
        resp.status = falcon.HTTP_200
