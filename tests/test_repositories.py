import pytest
from sqlalchemy.exc import IntegrityError

from library_catalog import models
from library_catalog.repositories import AuthorRepository, BookRepository


def test_find_all_returns_storage_order(db):
    repository = AuthorRepository(db)
    for name in ("C", "A", "B"):
        repository.save(models.Author(name=name))

    assert [a.name for a in repository.find_all()] == ["C", "A", "B"]


def test_find_by_id_misses_return_none(db):
    assert AuthorRepository(db).find_by_id(1) is None


def test_exists_by_id(db):
    repository = AuthorRepository(db)
    author = repository.save(models.Author(name="John Doe"))

    assert repository.exists_by_id(author.id)
    assert not repository.exists_by_id(author.id + 1)


def test_delete_all_counts_rows(db):
    authors = AuthorRepository(db)
    books = BookRepository(db)
    author = authors.save(models.Author(name="John Doe"))
    books.save(models.Book(title="One", isbn="1", author_id=author.id))
    books.save(models.Book(title="Two", isbn="2", author_id=author.id))

    assert books.delete_all() == 2
    assert books.find_all() == []
    assert authors.delete_all() == 1


def test_save_without_author_fails_and_rolls_back(db):
    repository = BookRepository(db)

    with pytest.raises(IntegrityError):
        repository.save(models.Book(title="Orphan", isbn="1", author_id=None))

    # session is usable again after the rollback
    assert repository.find_all() == []


def test_foreign_key_is_enforced(db):
    repository = BookRepository(db)

    with pytest.raises(IntegrityError):
        repository.save(models.Book(title="Orphan", isbn="1", author_id=404))


def test_book_author_is_loaded_lazily(db, session_factory):
    author = AuthorRepository(db).save(models.Author(name="John Doe"))
    book = BookRepository(db).save(models.Book(title="Lazy", isbn="1", author_id=author.id))

    fresh = session_factory()
    try:
        loaded = BookRepository(fresh).find_by_id(book.id)
        assert "author" not in loaded.__dict__
        assert loaded.author.name == "John Doe"
    finally:
        fresh.close()
