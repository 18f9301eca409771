"""Generic data-access layer shared by the catalog entities."""

import re
from typing import Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.catalog.entities.core._base import (
    INT64_MAX,
    SERVER_MANAGED_FIELDS,
    Entity,
    EntityTable,
    utcnow,
)

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)

_NUMERIC_ID = re.compile(r"[0-9]+")


class CreateResult(BaseModel, Generic[EntityT]):
    """Outcome of an insert: the record, the error message and the row count.

    A failed insert still carries the submitted record, with whatever state
    it had when the database rejected it.
    """

    model_config = ConfigDict(populate_by_name=True)

    value: EntityT = PydanticField(alias="Value")
    error: str | None = PydanticField(default=None, alias="Error")
    rows_affected: int = PydanticField(default=0, alias="RowsAffected")


class EntityRepository(Generic[EntityT, TableT]):
    """Find, create and soft-delete rows of one table.

    Only live rows (``deleted_at`` is NULL) are visible to lookups. Writes
    are flushed but not committed; the caller owns the transaction.
    """

    entity_type: type[EntityT]
    table_type: type[TableT]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _live(self):
        return select(self.table_type).where(self.table_type.deleted_at.is_(None))

    def _to_entity(self, row: TableT) -> EntityT:
        # NULLs left by columns added to existing tables read as zero values
        values = {
            name: getattr(row, name)
            for name in self.table_type.model_fields
            if getattr(row, name) is not None
        }
        return self.entity_type.model_validate(values)

    def _to_row(self, entity: EntityT, **overrides) -> TableT:
        columns = set(self.table_type.model_fields) - SERVER_MANAGED_FIELDS
        values = entity.model_dump(include=columns)
        values.update(overrides)
        return self.table_type(**values)

    def _get_row(self, item_id: int | str) -> TableT | None:
        if isinstance(item_id, str):
            if not _NUMERIC_ID.fullmatch(item_id):
                return None
            pk = int(item_id)
        else:
            pk = item_id
        # Ids the storage cannot hold match nothing
        if not 0 < pk <= INT64_MAX:
            return None
        statement = self._live().where(self.table_type.id == pk)
        return self._session.exec(statement).first()

    def get(self, item_id: int | str) -> EntityT | None:
        row = self._get_row(item_id)
        if row is None:
            return None
        return self._to_entity(row)

    def list_all(self) -> list[EntityT]:
        rows = self._session.exec(self._live()).all()
        return [self._to_entity(row) for row in rows]

    def create(self, entity: EntityT) -> CreateResult[EntityT]:
        try:
            created = self._insert(entity)
        except SQLAlchemyError as exc:
            self._session.rollback()
            error = str(getattr(exc, "orig", None) or exc)
            logger.error(
                "Failed to create {}: {}", self.entity_type.__name__, error
            )
            return CreateResult[self.entity_type](value=entity, error=error)
        return CreateResult[self.entity_type](value=created, rows_affected=1)

    def _insert(self, entity: EntityT) -> EntityT:
        row = self._to_row(entity)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity: EntityT) -> EntityT:
        """Mark the entity's row as deleted; related rows are left untouched."""
        if not entity.id:
            return entity
        row = self._get_row(entity.id)
        if row is None:
            return entity

        now = utcnow()
        row.deleted_at = now
        row.updated_at = now
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        logger.info("Soft-deleted {} {}", self.entity_type.__name__, row.id)
        return self._to_entity(row)
