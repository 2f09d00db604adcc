"""Starlette application wiring the Zuglang tool routes together."""

from __future__ import annotations

import time as _time
from typing import Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import BaseRoute, Route

from zuglang_tools.server.router import ExecutionRouter
from zuglang_tools.server.routes import build_tool_routes


def create_app(
    router: ExecutionRouter | None = None,
    *,
    base_url: str | None = None,
    extra_routes: list[BaseRoute] | None = None,
    **starlette_kwargs: Any,
) -> Starlette:
    """Create the HTTP application serving the Zuglang tools.

    Every endpoint is anonymous.

    Args:
        router: ExecutionRouter to use. Defaults to one over all tools.
        base_url: Base URL advertised by the discovery route.
        extra_routes: Additional routes mounted next to the tool routes.
        **starlette_kwargs: Passed through to ``Starlette`` (e.g. ``lifespan``).
    """
    router = router or ExecutionRouter()
    started = _time.monotonic()

    async def health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "uptime_seconds": round(_time.monotonic() - started, 1),
                "tool_count": len(router.tools),
            }
        )

    routes: list[BaseRoute] = [Route("/health", endpoint=health, methods=["GET"])]
    routes.extend(build_tool_routes(router, base_url=base_url))
    routes.extend(extra_routes or [])
    return Starlette(routes=routes, **starlette_kwargs)
