"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the shared database service."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(request: Request) -> Iterator[Session]:
    """Yield a session from the shared engine for the duration of one request."""
    with get_database_service(request).get_session() as session:
        yield session


async def get_raw_body(request: Request) -> bytes:
    """Raw request body; decoding is left to the handler."""
    return await request.body()
