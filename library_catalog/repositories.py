from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from library_catalog import models

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Save/find/delete operations for one model over a session."""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def exists_by_id(self, entity_id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == entity_id).first() is not None

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self._commit()

    def delete_all(self) -> int:
        deleted = 0
        for entity in self.db.query(self.model).all():
            self.db.delete(entity)
            deleted += 1
        self._commit()
        return deleted


class AuthorRepository(Repository[models.Author]):
    model = models.Author


class BookRepository(Repository[models.Book]):
    model = models.Book
