from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from moviesapi.db import get_db
from moviesapi.core.exceptions import handle_exception
from moviesapi.services.genre_service import GenreService
from moviesapi.schemas.genre import GenreCreate, GenreResponse

router = APIRouter(prefix="/api/genres", tags=["genres"])

def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService.from_session(db)

@router.get("/", response_model=List[GenreResponse])
def get_all_genres(genre_service: GenreService = Depends(get_genre_service)):
    try:
        return genre_service.get_all_genres()
    except Exception as e:
        raise handle_exception(e)

@router.post("/", response_model=GenreResponse)
def create_genre(
    genre_data: GenreCreate,
    genre_service: GenreService = Depends(get_genre_service)
):
    try:
        return genre_service.create_genre(genre_data)
    except Exception as e:
        raise handle_exception(e)

@router.put("/{genre_id}", response_model=GenreResponse)
def update_genre(
    genre_id: int,
    genre_data: GenreCreate,
    genre_service: GenreService = Depends(get_genre_service)
):
    try:
        return genre_service.update_genre(genre_id, genre_data)
    except Exception as e:
        raise handle_exception(e)
