from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from library_catalog.database import Base

class Author(Base):
    __tablename__ = "authors"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    
    # Books go away together with their author
    books = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
    )

class Book(Base):
    __tablename__ = "books"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    isbn = Column(String(20), nullable=False)
    author_id = Column(
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    
    author = relationship("Author", back_populates="books", lazy="select")
