"""Database initialization script."""

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.context import get_config


def init_db() -> None:
    """Connect to the configured database and reconcile every catalog table."""
    database_service = DbSessionService.connect(get_config().database)
    try:
        DbManageService(database_service.engine).reconcile_schema()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
