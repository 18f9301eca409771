"""Entity: Book."""

from pydantic import Field

from src.catalog.entities.core._base import Entity, Int64


class Book(Entity):
    """A catalogued book, optionally owned by a person.

    ``person_id`` 0 means the book has no owner. A non-zero value is expected
    to name a live person but is never checked.
    """

    title: str = Field(default="", alias="Title")
    author: str = Field(default="", alias="Author")
    call_number: Int64 = Field(default=0, alias="CallNumber")
    person_id: Int64 = Field(default=0, alias="PersonID")
