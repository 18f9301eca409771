"""Book database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    ``person_id`` references ``people.id`` logically only; no foreign key
    constraint is declared.
    """

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    title: str = ""
    author: str = ""
    call_number: int = 0
    person_id: int = Field(default=0)
