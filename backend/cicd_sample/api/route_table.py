"""Route Table — the ordered (method, path) → handler mapping of the service.

Invariants:
    - ROUTES is matched in declaration order; first match wins
    - Each non-root path also answers with a trailing slash (/health/ == /health)
    - Anything not in ROUTES (path or method) falls through to the
      "Route not found" fallback registered in error_handlers.py

Design Decisions:
    - Plain table over decorators: the whole public surface is readable in one place
      and registration is explicit
"""

from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI

from cicd_sample.api.routes import echo, service, users
from cicd_sample.schemas.echo import EchoResponse
from cicd_sample.schemas.error import ErrorResponse
from cicd_sample.schemas.service import HealthResponse, WelcomeResponse
from cicd_sample.schemas.user import UserListResponse, UserResponse


@dataclass(frozen=True)
class RouteEntry:
    method: str
    path: str
    handler: Callable[..., Any]
    name: str
    response_model: type | None = None
    tags: tuple[str, ...] = ()


ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/", service.welcome, "welcome", WelcomeResponse, ("service",)),
    RouteEntry("GET", "/health", service.health_check, "health", HealthResponse, ("health",)),
    RouteEntry("GET", "/api/users", users.list_users, "list_users", UserListResponse, ("users",)),
    RouteEntry(
        "GET", "/api/users/{user_id}", users.get_user, "get_user", UserResponse, ("users",),
    ),
    RouteEntry("POST", "/api/echo", echo.echo, "echo", EchoResponse, ("echo",)),
)

_ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    400: {"model": ErrorResponse},
}


def _route_paths(path: str) -> list[str]:
    """The declared path plus its trailing-slash form (non-strict matching)."""
    return [path] if path == "/" else [path, path + "/"]


def register_routes(app: FastAPI, routes: tuple[RouteEntry, ...] = ROUTES) -> None:
    """Add every table entry to *app*, in order."""
    for entry in routes:
        for path in _route_paths(entry.path):
            _add_route(app, entry, path)


def _add_route(app: FastAPI, entry: RouteEntry, path: str) -> None:
    app.add_api_route(
        path,
        entry.handler,
        methods=[entry.method],
        name=entry.name,
        response_model=entry.response_model,
        responses=_ERROR_RESPONSES,
        tags=list(entry.tags),
    )
