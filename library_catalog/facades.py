from typing import List

from library_catalog import models, schemas
from library_catalog.mapper import to_dto, to_entity
from library_catalog.services import AuthorService, BookService


class AuthorFacade:
    def __init__(self, author_service: AuthorService):
        self.author_service = author_service

    def create_author(self, author_dto: schemas.AuthorCreate) -> schemas.AuthorResponse:
        author = to_entity(author_dto, models.Author)
        saved = self.author_service.create_author(author)
        return to_dto(saved, schemas.AuthorResponse)

    def get_author_by_id(self, author_id: int) -> schemas.AuthorResponse:
        author = self.author_service.get_author_by_id(author_id)
        return to_dto(author, schemas.AuthorResponse)

    def get_all_authors(self) -> List[schemas.AuthorResponse]:
        return [to_dto(author, schemas.AuthorResponse) for author in self.author_service.get_all_authors()]

    def update_author(self, author_id: int, author_dto: schemas.AuthorCreate) -> schemas.AuthorResponse:
        author = to_entity(author_dto, models.Author)
        updated = self.author_service.update_author(author_id, author)
        return to_dto(updated, schemas.AuthorResponse)

    def delete_author(self, author_id: int) -> None:
        self.author_service.delete_author(author_id)


class BookFacade:
    def __init__(self, book_service: BookService):
        self.book_service = book_service

    @staticmethod
    def _to_entity(book_dto: schemas.BookCreate) -> models.Book:
        return to_entity(book_dto, models.Book, author_id=book_dto.author.id)

    def create_book(self, book_dto: schemas.BookCreate) -> schemas.BookResponse:
        saved = self.book_service.create_book(self._to_entity(book_dto))
        return to_dto(saved, schemas.BookResponse)

    def get_book_by_id(self, book_id: int) -> schemas.BookResponse:
        book = self.book_service.get_book_by_id(book_id)
        return to_dto(book, schemas.BookResponse)

    def get_all_books(self) -> List[schemas.BookResponse]:
        return [to_dto(book, schemas.BookResponse) for book in self.book_service.get_all_books()]

    def update_book(self, book_id: int, book_dto: schemas.BookCreate) -> schemas.BookResponse:
        updated = self.book_service.update_book(book_id, self._to_entity(book_dto))
        return to_dto(updated, schemas.BookResponse)

    def delete_book(self, book_id: int) -> None:
        self.book_service.delete_book(book_id)
