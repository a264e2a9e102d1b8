from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from library_catalog import schemas
from library_catalog.dependencies import get_author_facade
from library_catalog.facades import AuthorFacade

router = APIRouter()

NOT_FOUND = {404: {"model": schemas.ErrorResponse}}
BAD_REQUEST = {400: {"model": schemas.ErrorResponse}}


@router.post("", response_model=schemas.AuthorResponse, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_author(
    author: schemas.AuthorCreate,
    facade: AuthorFacade = Depends(get_author_facade)
):
    """Create a new author."""
    return facade.create_author(author)

@router.get("/{author_id}", response_model=schemas.AuthorResponse, responses=NOT_FOUND)
def get_author(
    author_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: AuthorFacade = Depends(get_author_facade)
):
    """Get an author by ID."""
    return facade.get_author_by_id(author_id)

@router.get("", response_model=List[schemas.AuthorResponse])
def get_authors(facade: AuthorFacade = Depends(get_author_facade)):
    """List all authors in storage order."""
    return facade.get_all_authors()

@router.put("/{author_id}", response_model=schemas.AuthorResponse, responses={**NOT_FOUND, **BAD_REQUEST})
def update_author(
    author: schemas.AuthorCreate,
    author_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: AuthorFacade = Depends(get_author_facade)
):
    """Replace an author's name. Idempotent."""
    return facade.update_author(author_id, author)

@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_author(
    author_id: int = Path(..., ge=schemas.ID_MIN, le=schemas.ID_MAX),
    facade: AuthorFacade = Depends(get_author_facade)
):
    """Delete an author together with their books."""
    facade.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
