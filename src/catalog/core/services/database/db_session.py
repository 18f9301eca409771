"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DatabaseConnectionError(RuntimeError):
    """The database could not be reached at startup."""


class DbSessionService:
    """Owns the single process-wide engine and hands out sessions from it."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def connect(cls, db_config: DatabaseConfig | None = None) -> "DbSessionService":
        """Open the engine described by ``db_config`` and verify it is reachable.

        Raises:
            DatabaseConnectionError: the URL is unusable or the database
                refused the connection. Callers treat this as fatal.
        """
        db_config = db_config or get_config().database
        try:
            logger.info(
                "Connecting to database using connection string: {}",
                db_config.connection_string,
            )
            engine = create_engine(
                db_config.url,
                echo=db_config.echo,
                connect_args=cls._get_connect_args(db_config),
            )
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, ValueError) as e:
            logger.critical("Failed to connect to database: {}", e)
            raise DatabaseConnectionError(str(e)) from e

        logger.info("Connected to database successfully")
        return cls(engine)

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig) -> dict:
        if db_config.is_sqlite:
            # Sessions are used from Starlette's threadpool
            return {"check_same_thread": False}
        return {}

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for request handlers and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error("Database transaction failed: {}: {}", type(e).__name__, e)
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        """Release every pooled connection; called once at shutdown."""
        logger.info("Closing database connection")
        self._engine.dispose()
