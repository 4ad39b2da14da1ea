"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from discussion_tools.interface.dependencies import shutdown, startup
from discussion_tools.interface.error_handlers import register_error_handlers
from discussion_tools.interface.routes import TOOLS, router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the shared HTTP client for the lifetime of the app."""
    await startup()
    yield
    await shutdown()


def _describe_tools() -> str:
    lines = [
        "Read-only tools over GitHub discussions. "
        "Invoke a tool with `POST /tools/<name>` and a JSON body of its arguments.",
        "",
    ]
    lines.extend(f"- `{tool.name}`: {tool.description}" for tool in TOOLS)
    return "\n".join(lines)


def create_app() -> FastAPI:
    """Build the tool server: catalogue, tool routes and the error envelope."""
    app = FastAPI(
        title="GitHub Discussion Tools",
        version="1.0.0",
        description=_describe_tools(),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str | int]:
        return {"status": "ok", "tools": len(TOOLS)}

    return app
