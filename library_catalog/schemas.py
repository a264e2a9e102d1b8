from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

# Ids are stored as signed 64-bit integers
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1


def _strip(value):
    if isinstance(value, str):
        return value.strip()
    return value

class AuthorBase(BaseModel):
    name: str = Field(..., max_length=255, description="Author name")

class AuthorCreate(AuthorBase):
    """Request body for creating or replacing an author. A body ``id`` is ignored."""
    name: str = Field(..., min_length=1, max_length=255, description="Author name")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

class AuthorResponse(AuthorBase):
    id: int

    class Config:
        from_attributes = True

class AuthorRef(BaseModel):
    """Reference to an existing author inside a book payload."""
    id: int = Field(..., ge=ID_MIN, le=ID_MAX, description="Author ID")
    name: Optional[str] = Field(None, description="Ignored on input")

class BookBase(BaseModel):
    title: str = Field(..., max_length=255, description="Book title")
    isbn: str = Field(..., max_length=20, description="Book ISBN")

class BookCreate(BookBase):
    title: str = Field(..., min_length=1, max_length=255, description="Book title")
    isbn: str = Field(..., min_length=1, max_length=20, description="Book ISBN")
    author: AuthorRef = Field(..., description="Author of the book")

    @field_validator("title", "isbn", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

class BookResponse(BookBase):
    id: int
    author: AuthorResponse

    class Config:
        from_attributes = True

class ErrorResponse(BaseModel):
    """Body returned for every mapped error"""
    statusCode: int
    message: str

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    database: str
