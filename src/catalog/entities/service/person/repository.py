"""Person repository."""

from src.catalog.entities.core.repository import EntityRepository
from src.catalog.entities.service.book import BookRepository
from src.catalog.entities.service.person.entity import Person
from src.catalog.entities.service.person.table import PersonTable


class PersonRepository(EntityRepository[Person, PersonTable]):
    """Data-access layer for people.

    Books are attached only by :meth:`get_with_books`; every other read
    leaves ``Person.books`` unset.
    """

    entity_type = Person
    table_type = PersonTable

    def get_with_books(self, item_id: int | str) -> Person | None:
        person = self.get(item_id)
        if person is None:
            return None
        person.books = BookRepository(self._session).list_for_person(person.id)
        return person

    def _insert(self, entity: Person) -> Person:
        created = super()._insert(entity)
        if entity.books is None:
            return created

        # Books submitted with the person are saved as owned by it
        books = BookRepository(self._session)
        created.books = [
            books._insert(book.model_copy(update={"person_id": created.id}))
            for book in entity.books
        ]
        return created
