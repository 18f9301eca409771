"""Database services: engine/session ownership and schema reconciliation."""

from .db_manage import DbManageService, catalog_tables
from .db_session import DatabaseConnectionError, DbSessionService

__all__ = [
    "DatabaseConnectionError",
    "DbManageService",
    "DbSessionService",
    "catalog_tables",
]
