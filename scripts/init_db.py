import argparse
import sys
import os
import logging
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from library_catalog.config import LOG_LEVEL
from library_catalog.database import engine, SessionLocal, Base
from library_catalog.logging_config import setup_logging
from library_catalog.models import Author, Book
from library_catalog.repositories import AuthorRepository, BookRepository

logger = logging.getLogger("init_db")

AUTHORS = [
    "Leo Tolstoy",
    "Fyodor Dostoevsky",
    "Mikhail Bulgakov",
    "George Orwell",
    "Ernest Hemingway",
]

BOOKS = [
    {"title": "War and Peace", "author": "Leo Tolstoy", "isbn": "978-5-17-098230-0"},
    {"title": "Anna Karenina", "author": "Leo Tolstoy", "isbn": "978-5-17-098231-7"},
    {"title": "Crime and Punishment", "author": "Fyodor Dostoevsky", "isbn": "978-5-389-01088-5"},
    {"title": "The Master and Margarita", "author": "Mikhail Bulgakov", "isbn": "978-5-17-982346-1"},
    {"title": "1984", "author": "George Orwell", "isbn": "978-0-452-28423-4"},
    {"title": "Animal Farm", "author": "George Orwell", "isbn": "978-0-452-28424-1"},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "isbn": "978-0-684-80122-3"},
]

def create_tables():
    """Create every table known to the models."""
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")

def reset_catalog(db):
    """Remove every book and author before seeding."""
    books = BookRepository(db).delete_all()
    authors = AuthorRepository(db).delete_all()
    logger.info("Removed %d books and %d authors", books, authors)

def seed_authors(db):
    added = 0
    for name in AUTHORS:
        if not db.query(Author).filter(Author.name == name).first():
            db.add(Author(name=name))
            added += 1

    db.commit()
    logger.info("Added %d new authors (of %d)", added, len(AUTHORS))

def seed_books(db):
    added = 0
    for book_data in BOOKS:
        author = db.query(Author).filter(Author.name == book_data["author"]).first()
        if author is None:
            logger.warning("Skipping %r: author %r missing", book_data["title"], book_data["author"])
            continue

        if not db.query(Book).filter(Book.isbn == book_data["isbn"]).first():
            db.add(Book(title=book_data["title"], isbn=book_data["isbn"], author=author))
            added += 1

    db.commit()
    logger.info("Added %d new books (of %d)", added, len(BOOKS))

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create tables and seed the library catalog")
    parser.add_argument("--reset", action="store_true", help="delete existing authors and books first")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(LOG_LEVEL)
    create_tables()

    db = SessionLocal()
    try:
        if args.reset:
            reset_catalog(db)
        seed_authors(db)
        seed_books(db)
    except Exception:
        logger.exception("Seeding failed")
        db.rollback()
        raise
    finally:
        db.close()

    logger.info("Database initialised")

if __name__ == "__main__":
    main()
