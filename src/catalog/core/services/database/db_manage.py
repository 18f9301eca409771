"""Schema reconciliation for the catalog tables."""

from loguru import logger
from sqlalchemy import Table, inspect, text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def catalog_tables() -> list[Table]:
    """Tables of every declared catalog entity."""
    from src.catalog.entities.service.book import BookTable
    from src.catalog.entities.service.person import PersonTable

    return [PersonTable.__table__, BookTable.__table__]


class DbManageService:
    """Bring the database schema in line with the declared entities."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def reconcile_schema(self, tables: list[Table] | None = None) -> None:
        """Create missing tables, columns and indexes.

        Existing columns are never altered or dropped, so running this on
        every startup is safe.
        """
        tables = tables if tables is not None else catalog_tables()
        SQLModel.metadata.create_all(self._engine, tables=tables)

        for table in tables:
            self._add_missing_columns(table)
            self._add_missing_indexes(table)

        logger.info(
            "Database schema reconciled for tables: {}",
            ", ".join(table.name for table in tables),
        )

    def _add_missing_columns(self, table: Table) -> None:
        existing = {column["name"] for column in inspect(self._engine).get_columns(table.name)}
        preparer = self._engine.dialect.identifier_preparer

        with self._engine.begin() as connection:
            for column in table.columns:
                if column.name in existing:
                    continue
                column_type = column.type.compile(dialect=self._engine.dialect)
                logger.info("Adding column {}.{} ({})", table.name, column.name, column_type)
                connection.execute(
                    text(
                        f"ALTER TABLE {preparer.format_table(table)} "
                        f"ADD COLUMN {preparer.format_column(column)} {column_type}"
                    )
                )

    def _add_missing_indexes(self, table: Table) -> None:
        existing = {index["name"] for index in inspect(self._engine).get_indexes(table.name)}
        for index in table.indexes:
            if index.name in existing:
                continue
            logger.info("Creating index {} on {}", index.name, table.name)
            index.create(self._engine)
