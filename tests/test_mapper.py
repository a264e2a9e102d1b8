from library_catalog import models, schemas
from library_catalog.mapper import to_dto, to_entity


def test_to_entity_copies_column_fields():
    author = to_entity(schemas.AuthorCreate(name="John Doe"), models.Author)

    assert isinstance(author, models.Author)
    assert author.name == "John Doe"
    assert author.id is None


def test_to_entity_applies_overrides_and_skips_relationships():
    dto = schemas.BookCreate(title="Test Book", isbn="1234567890", author=schemas.AuthorRef(id=3, name="X"))

    book = to_entity(dto, models.Book, author_id=dto.author.id)

    assert (book.title, book.isbn, book.author_id) == ("Test Book", "1234567890", 3)
    assert book.author is None


def test_to_dto_maps_nested_author():
    author = models.Author(id=1, name="John Doe")
    book = models.Book(id=2, title="Test Book", isbn="1234567890", author=author)

    dto = to_dto(book, schemas.BookResponse)

    assert dto.model_dump() == {
        "id": 2,
        "title": "Test Book",
        "isbn": "1234567890",
        "author": {"id": 1, "name": "John Doe"},
    }
