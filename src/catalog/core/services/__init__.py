from .database import (
    DatabaseConnectionError,
    DbManageService,
    DbSessionService,
    catalog_tables,
)

__all__ = [
    "DatabaseConnectionError",
    "DbManageService",
    "DbSessionService",
    "catalog_tables",
]
