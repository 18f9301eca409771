"""Unit tests for the catalog repositories against in-memory SQLite."""

import pytest
from sqlmodel import Session, select

from src.catalog.entities.service.book import Book, BookRepository, BookTable
from src.catalog.entities.service.person import Person, PersonRepository, PersonTable


class TestBookRepository:
    """Test the BookRepository in isolation."""

    @pytest.fixture
    def book_repo(self, session: Session) -> BookRepository:
        return BookRepository(session)

    def test_create_assigns_identity_and_timestamps(self, book_repo: BookRepository, session: Session):
        result = book_repo.create(Book(title="Dune", author="Herbert", call_number=7))
        session.commit()

        assert result.error is None
        assert result.rows_affected == 1
        assert result.value.id > 0
        assert result.value.title == "Dune"
        assert result.value.call_number == 7
        assert result.value.created_at.year > 1
        assert result.value.deleted_at is None

    def test_ids_are_monotonic(self, book_repo: BookRepository, session: Session):
        first = book_repo.create(Book(title="A")).value
        second = book_repo.create(Book(title="B")).value
        session.commit()

        assert second.id > first.id

    def test_get_not_found(self, book_repo: BookRepository):
        assert book_repo.get(999) is None

    def test_get_with_non_numeric_id(self, book_repo: BookRepository, session: Session):
        book_repo.create(Book(title="Dune"))
        session.commit()

        assert book_repo.get("abc") is None
        assert book_repo.get("1") is not None

    @pytest.mark.parametrize("item_id", ["1_0", " 1", "+1", "\u0661", "1\n", "-1", "0"])
    def test_only_plain_digits_match(self, book_repo: BookRepository, session: Session, item_id: str):
        for number in range(10):
            book_repo.create(Book(title=f"b{number + 1}"))
        session.commit()

        assert book_repo.get(item_id) is None

    @pytest.mark.parametrize("item_id", ["9223372036854775808", "99999999999999999999", 2**64])
    def test_ids_beyond_int64_match_nothing(self, book_repo: BookRepository, item_id):
        assert book_repo.get(item_id) is None

    def test_int64_max_id_is_queried(self, book_repo: BookRepository):
        assert book_repo.get("9223372036854775807") is None

    def test_delete_is_soft(self, book_repo: BookRepository, session: Session):
        created = book_repo.create(Book(title="Dune")).value
        session.commit()

        deleted = book_repo.delete(created)
        session.commit()

        assert deleted.deleted_at is not None
        assert book_repo.get(created.id) is None
        assert book_repo.list_all() == []

        row = session.exec(select(BookTable).where(BookTable.id == created.id)).one()
        assert row.deleted_at is not None

    def test_delete_zero_value_is_a_no_op(self, book_repo: BookRepository, session: Session):
        book_repo.create(Book(title="Dune"))
        session.commit()

        assert book_repo.delete(Book()) == Book()
        assert len(book_repo.list_all()) == 1

    def test_create_with_unknown_owner(self, book_repo: BookRepository, session: Session):
        result = book_repo.create(Book(title="Orphan", person_id=404))
        session.commit()

        assert result.error is None
        assert result.value.person_id == 404

    def test_list_for_person_skips_deleted_books(self, book_repo: BookRepository, session: Session):
        kept = book_repo.create(Book(title="Kept", person_id=1)).value
        gone = book_repo.create(Book(title="Gone", person_id=1)).value
        book_repo.create(Book(title="Other", person_id=2))
        book_repo.delete(gone)
        session.commit()

        assert [book.id for book in book_repo.list_for_person(1)] == [kept.id]


class TestPersonRepository:
    """Test the PersonRepository in isolation."""

    @pytest.fixture
    def person_repo(self, session: Session) -> PersonRepository:
        return PersonRepository(session)

    def test_list_all_leaves_books_unset(self, person_repo: PersonRepository, session: Session):
        created = person_repo.create(Person(name="Ada", email="ada@x.com")).value
        BookRepository(session).create(Book(title="Notes", person_id=created.id))
        session.commit()

        people = person_repo.list_all()

        assert len(people) == 1
        assert people[0].books is None

    def test_get_with_books(self, person_repo: PersonRepository, session: Session):
        created = person_repo.create(Person(name="Ada", email="ada@x.com")).value
        BookRepository(session).create(Book(title="Notes", person_id=created.id))
        session.commit()

        person = person_repo.get_with_books(created.id)

        assert person is not None
        assert [book.title for book in person.books] == ["Notes"]

    def test_get_with_books_without_books(self, person_repo: PersonRepository, session: Session):
        created = person_repo.create(Person(name="Ada", email="ada@x.com")).value
        session.commit()

        assert person_repo.get_with_books(created.id).books == []

    def test_create_saves_embedded_books(self, person_repo: PersonRepository, session: Session):
        result = person_repo.create(
            Person(name="Ada", email="ada@x.com", books=[Book(title="Notes"), Book(title="Letters")])
        )
        session.commit()

        assert result.error is None
        assert [book.person_id for book in result.value.books] == [result.value.id] * 2
        assert len(BookRepository(session).list_for_person(result.value.id)) == 2

    def test_duplicate_email_is_reported_not_raised(self, person_repo: PersonRepository, session: Session):
        person_repo.create(Person(name="Ada", email="ada@x.com"))
        session.commit()

        result = person_repo.create(Person(name="Other Ada", email="ada@x.com"))
        session.commit()

        assert result.error is not None
        assert "UNIQUE" in result.error
        assert result.rows_affected == 0
        assert result.value.id == 0
        assert result.value.name == "Other Ada"
        assert len(person_repo.list_all()) == 1

    def test_delete_does_not_cascade(self, person_repo: PersonRepository, session: Session):
        created = person_repo.create(
            Person(name="Ada", email="ada@x.com", books=[Book(title="Notes")])
        ).value
        session.commit()

        person_repo.delete(created)
        session.commit()

        assert person_repo.get(created.id) is None
        assert session.exec(select(PersonTable)).one().deleted_at is not None
        assert [book.title for book in BookRepository(session).list_all()] == ["Notes"]
