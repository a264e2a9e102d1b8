from fastapi import Depends
from sqlalchemy.orm import Session

from library_catalog.database import get_db
from library_catalog.facades import AuthorFacade, BookFacade
from library_catalog.repositories import AuthorRepository, BookRepository
from library_catalog.services import AuthorService, BookService


def get_author_facade(db: Session = Depends(get_db)) -> AuthorFacade:
    return AuthorFacade(AuthorService(AuthorRepository(db)))


def get_book_facade(db: Session = Depends(get_db)) -> BookFacade:
    return BookFacade(BookService(BookRepository(db), AuthorRepository(db)))
