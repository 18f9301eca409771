"""Book repository."""

from src.catalog.entities.core.repository import EntityRepository
from src.catalog.entities.service.book.entity import Book
from src.catalog.entities.service.book.table import BookTable


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books."""

    entity_type = Book
    table_type = BookTable

    def list_for_person(self, person_id: int) -> list[Book]:
        """Live books owned by ``person_id``, in storage order."""
        statement = self._live().where(BookTable.person_id == person_id)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
