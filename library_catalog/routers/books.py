from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from library_catalog import schemas
from library_catalog.dependencies import get_book_facade
from library_catalog.facades import BookFacade

router = APIRouter()

NOT_FOUND = {404: {"model": schemas.ErrorResponse}}
BAD_REQUEST = {400: {"model": schemas.ErrorResponse}}


@router.post("", response_model=schemas.BookResponse, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_book(
    book: schemas.BookCreate,
    facade: BookFacade = Depends(get_book_facade)
):
    """Create a new book for an existing author."""
    return facade.create_book(book)

@router.get("/{book_id}", response_model=schemas.BookResponse, responses=NOT_FOUND)
def get_book(
    book_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: BookFacade = Depends(get_book_facade)
):
    """Get a book by ID, with its author."""
    return facade.get_book_by_id(book_id)

@router.get("", response_model=List[schemas.BookResponse])
def get_books(facade: BookFacade = Depends(get_book_facade)):
    return facade.get_all_books()

@router.put("/{book_id}", response_model=schemas.BookResponse, responses={**NOT_FOUND, **BAD_REQUEST})
def update_book(
    book: schemas.BookCreate,
    book_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: BookFacade = Depends(get_book_facade)
):
    """Replace title, ISBN and author of a book. Idempotent."""
    return facade.update_book(book_id, book)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_book(
    book_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: BookFacade = Depends(get_book_facade)
):
    facade.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
