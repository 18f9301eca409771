"""Person API router: read, create and soft-delete people.

Every route answers 200. Lookups that match nothing return the zero-value
person and create failures are reported inside the create result.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.catalog.api.http.deps import get_raw_body, get_session
from src.catalog.entities.core.repository import CreateResult
from src.catalog.entities.service.person import Person, PersonRepository

router = APIRouter(tags=["people"])


@router.get("/people", response_model=list[Person])
def list_people(session: Session = Depends(get_session)) -> list[Person]:
    """List all people, without their books."""
    return PersonRepository(session).list_all()


@router.get("/person/{item_id}", response_model=Person)
def get_person(item_id: str, session: Session = Depends(get_session)) -> Person:
    """Get a person by ID together with the books they own."""
    person = PersonRepository(session).get_with_books(item_id)
    if person is None:
        return Person(books=[])
    return person


@router.post("/create/person", response_model=CreateResult[Person])
def create_person(
    body: bytes = Depends(get_raw_body),
    session: Session = Depends(get_session),
) -> CreateResult[Person]:
    """Create a person, and any books submitted with it."""
    result = PersonRepository(session).create(Person.decode(body))
    session.commit()
    return result


@router.delete("/delete/person/{item_id}", response_model=Person)
def delete_person(item_id: str, session: Session = Depends(get_session)) -> Person:
    """Soft-delete a person. Their books are left as they are."""
    repository = PersonRepository(session)
    person = repository.get(item_id) or Person()
    deleted = repository.delete(person)
    session.commit()
    return deleted
