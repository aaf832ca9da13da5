from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional

from moviesapi.db import get_db
from moviesapi.core.exceptions import handle_exception
from moviesapi.services.movie_service import MovieService
from moviesapi.schemas.movie import MovieForm, MovieResponse, PosterUpload

router = APIRouter(
    prefix="/api/movies",
    tags=["movies"],
    responses={404: {"description": "Not found"}},
)

def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService.from_session(db)

def movie_form(
    title: str = Form(..., max_length=250),
    story_line: str = Form(..., alias="storyLine", max_length=2500),
    year: int = Form(...),
    rate: float = Form(..., allow_inf_nan=False),
    genre_id: int = Form(..., alias="genreId"),
) -> MovieForm:
    return MovieForm(title=title, story_line=story_line, year=year, rate=rate, genre_id=genre_id)

def read_poster(poster: Optional[UploadFile]) -> Optional[PosterUpload]:
    """Read an uploaded poster fully into memory; a part with no filename counts as absent"""
    if poster is None or not poster.filename:
        return None
    return PosterUpload(filename=poster.filename, content=poster.file.read())

@router.get("/", response_model=List[MovieResponse])
def get_all_movies(movie_service: MovieService = Depends(get_movie_service)):
    try:
        return movie_service.get_all_movies()
    except Exception as e:
        raise handle_exception(e)

# Registered ahead of "/{movie_id}" so the literal segment wins
@router.get("/GetByGenreId", response_model=List[MovieResponse])
def get_movies_by_genre(
    genre_id: int = Query(..., alias="id", description="Genre ID"),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.get_movies_by_genre(genre_id)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.get_movie(movie_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("/", response_model=MovieResponse)
def create_movie(
    form: MovieForm = Depends(movie_form),
    poster: Optional[UploadFile] = File(None),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.create_movie(form, read_poster(poster))
    except Exception as e:
        raise handle_exception(e)

@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: int,
    form: MovieForm = Depends(movie_form),
    poster: Optional[UploadFile] = File(None),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.update_movie(movie_id, form, read_poster(poster))
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{movie_id}", response_model=MovieResponse)
def delete_movie(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.delete_movie(movie_id)
    except Exception as e:
        raise handle_exception(e)
