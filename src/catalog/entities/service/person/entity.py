"""Entity: Person."""

from pydantic import Field

from src.catalog.entities.core._base import Entity
from src.catalog.entities.service.book.entity import Book


class Person(Entity):
    """A library patron and the books they own.

    ``books`` stays ``None`` unless the person was loaded together with its
    books, so listings serialize ``"Books": null``.
    """

    name: str = Field(default="", alias="Name")
    email: str = Field(default="", alias="Email")
    books: list[Book] | None = Field(default=None, alias="Books")
