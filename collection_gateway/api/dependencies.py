"""Dependency injection for FastAPI endpoints"""

from typing import Generator

from fastapi import Request

from collection_gateway.domain.repositories import Repositories
from collection_gateway.infrastructure.database.repositories import build_sql_repositories
from collection_gateway.infrastructure.database.session import session_scope
from collection_gateway.utils.clock import Clock


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_clock(request: Request) -> Clock:
    """Provide the application's time source"""
    return request.app.state.clock


def get_repositories(request: Request) -> Generator[Repositories, None, None]:
    """
    Provide repositories for the configured backend.

    In-memory repositories live for the whole app; SQLAlchemy ones wrap a
    per-request session that commits when the endpoint succeeds.
    """
    state = request.app.state
    if state.session_factory is None:
        yield state.repositories
        return

    with session_scope(state.session_factory) as db:
        yield build_sql_repositories(db)
