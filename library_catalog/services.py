import logging
from typing import List

from library_catalog import models
from library_catalog.exceptions import InvalidReferenceError, ResourceNotFoundError
from library_catalog.repositories import AuthorRepository, BookRepository

logger = logging.getLogger(__name__)


class AuthorService:
    def __init__(self, author_repository: AuthorRepository):
        self.author_repository = author_repository

    def create_author(self, author: models.Author) -> models.Author:
        saved = self.author_repository.save(author)
        logger.info("Created author %s", saved.id)
        return saved

    def get_author_by_id(self, author_id: int) -> models.Author:
        author = self.author_repository.find_by_id(author_id)
        if author is None:
            logger.warning("Author %s not found", author_id)
            raise ResourceNotFoundError("Author not found")
        return author

    def get_all_authors(self) -> List[models.Author]:
        return self.author_repository.find_all()

    def update_author(self, author_id: int, author: models.Author) -> models.Author:
        existing = self.get_author_by_id(author_id)
        existing.name = author.name
        saved = self.author_repository.save(existing)
        logger.info("Updated author %s", author_id)
        return saved

    def delete_author(self, author_id: int) -> None:
        author = self.get_author_by_id(author_id)
        self.author_repository.delete(author)
        logger.info("Deleted author %s", author_id)


class BookService:
    def __init__(self, book_repository: BookRepository, author_repository: AuthorRepository):
        self.book_repository = book_repository
        self.author_repository = author_repository

    def _resolve_author(self, author_id: int) -> models.Author:
        author = self.author_repository.find_by_id(author_id)
        if author is None:
            logger.warning("Book references missing author %s", author_id)
            raise InvalidReferenceError("Author not found")
        return author

    def create_book(self, book: models.Book) -> models.Book:
        book.author = self._resolve_author(book.author_id)
        saved = self.book_repository.save(book)
        logger.info("Created book %s", saved.id)
        return saved

    def get_book_by_id(self, book_id: int) -> models.Book:
        book = self.book_repository.find_by_id(book_id)
        if book is None:
            logger.warning("Book %s not found", book_id)
            raise ResourceNotFoundError("Book not found")
        return book

    def get_all_books(self) -> List[models.Book]:
        return self.book_repository.find_all()

    def update_book(self, book_id: int, book: models.Book) -> models.Book:
        existing = self.get_book_by_id(book_id)
        author = self._resolve_author(book.author_id)
        existing.title = book.title
        existing.isbn = book.isbn
        existing.author = author
        saved = self.book_repository.save(existing)
        logger.info("Updated book %s", book_id)
        return saved

    def delete_book(self, book_id: int) -> None:
        book = self.get_book_by_id(book_id)
        self.book_repository.delete(book)
        logger.info("Deleted book %s", book_id)
