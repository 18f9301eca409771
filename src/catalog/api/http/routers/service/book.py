"""Book API router with read, create and soft-delete operations."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.catalog.api.http.deps import get_raw_body, get_session
from src.catalog.entities.core.repository import CreateResult
from src.catalog.entities.service.book import Book, BookRepository

router = APIRouter(tags=["books"])


@router.get("/books", response_model=list[Book])
def list_books(session: Session = Depends(get_session)) -> list[Book]:
    """List all books."""
    return BookRepository(session).list_all()


@router.get("/book/{item_id}", response_model=Book)
def get_book(item_id: str, session: Session = Depends(get_session)) -> Book:
    """Get a book by ID; the zero-value book when there is none."""
    return BookRepository(session).get(item_id) or Book()


@router.post("/create/book", response_model=CreateResult[Book])
def create_book(
    body: bytes = Depends(get_raw_body),
    session: Session = Depends(get_session),
) -> CreateResult[Book]:
    """Create a book. The owner reference is stored as given."""
    result = BookRepository(session).create(Book.decode(body))
    session.commit()
    return result


@router.delete("/delete/book/{item_id}", response_model=Book)
def delete_book(item_id: str, session: Session = Depends(get_session)) -> Book:
    """Soft-delete a book."""
    repository = BookRepository(session)
    deleted = repository.delete(repository.get(item_id) or Book())
    session.commit()
    return deleted
