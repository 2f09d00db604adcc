"""Starlette route handlers for the Zuglang tool endpoints."""

from __future__ import annotations

import logging
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from zuglang_tools.adapters.errors import ErrorMapper
from zuglang_tools.catalog import discovery_payload
from zuglang_tools.constants import API_PREFIX, ROUTER_NAME
from zuglang_tools.errors import InvalidRequestError
from zuglang_tools.server.router import ExecutionRouter
from zuglang_tools.tools import ToolDescriptor

logger = logging.getLogger(__name__)

ROUTER_ONLY_MESSAGE = (
    "This is a router endpoint. Use GET to discover tools, then call the tool-specific URLs returned."
)


def request_base_url(request: Request, prefix: str = API_PREFIX) -> str:
    """Base URL for tool links when none is configured: ``<scheme>://<host><prefix>``."""
    return str(request.base_url).rstrip("/") + prefix


async def _read_json_object(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        # Malformed JSON, bad UTF-8 and integer literals past the digit limit.
        raise InvalidRequestError("Request body must be valid JSON") from None
    if not isinstance(body, dict):
        raise InvalidRequestError()
    return body


def build_tool_routes(
    router: ExecutionRouter,
    *,
    base_url: str | None = None,
    prefix: str = API_PREFIX,
) -> list[Route]:
    """Build the discovery route and one POST route per tool.

    Args:
        router: ExecutionRouter that runs the tools.
        base_url: Base URL advertised in the discovery listing. When None it
            is derived from each incoming request.
        prefix: Path prefix shared by all routes (default ``/api``).

    Returns:
        List of Starlette Route objects.
    """
    error_mapper = ErrorMapper()
    descriptors = list(router.tools.values())

    async def tool_router(request: Request) -> JSONResponse:
        logger.info('Http function processed request for url "%s"', request.url)
        if request.method != "GET":
            return JSONResponse({"error": ROUTER_ONLY_MESSAGE}, status_code=405)
        try:
            url = base_url if base_url else request_base_url(request, prefix)
            return JSONResponse(discovery_payload(url, descriptors))
        except Exception as exc:
            logger.exception("Error processing request")
            return JSONResponse(error_mapper.to_http_body(None, exc), status_code=500)

    def make_endpoint(descriptor: ToolDescriptor) -> Any:
        async def call_tool(request: Request) -> Response:
            logger.info('Http function processed request for url "%s"', request.url)
            try:
                arguments = await _read_json_object(request)
                result = router.execute(descriptor.name, arguments)
                if result.is_error:
                    return JSONResponse(
                        error_mapper.to_http_body(descriptor.name, result.error),
                        status_code=error_mapper.status_code(result.error),
                    )
                return JSONResponse({"tool": descriptor.name, **result.payload})
            except InvalidRequestError as exc:
                return JSONResponse(error_mapper.to_http_body(descriptor.name, exc), status_code=400)
            except Exception as exc:
                logger.exception("%s error", descriptor.name)
                return JSONResponse(error_mapper.to_http_body(descriptor.name, exc), status_code=500)

        call_tool.__name__ = f"call_{descriptor.name}"
        return call_tool

    routes = [
        Route(
            f"{prefix}/{ROUTER_NAME}",
            endpoint=tool_router,
            methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        )
    ]
    for descriptor in descriptors:
        routes.append(
            Route(
                f"{prefix}{descriptor.path}",
                endpoint=make_endpoint(descriptor),
                methods=[descriptor.method],
            )
        )
    return routes
