"""Person database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class PersonTable(EntityTable, table=True):
    """Database persistence model for people.

    The unique index on ``email`` is declared for the storage layer only;
    nothing in the application checks it.
    """

    __tablename__ = "people"
    __table_args__ = {"sqlite_autoincrement": True}

    name: str = ""
    email: str = Field(default="", unique=True, index=True)
