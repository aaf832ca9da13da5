import logging
import os
from typing import List, Optional
from sqlalchemy.orm import Session
from moviesapi.core.config import PosterPolicy, get_settings
from moviesapi.core.exceptions import InvalidInputException, NotFoundException
from moviesapi.core.interfaces import GenreStoreInterface, MovieStoreInterface
from moviesapi.repositories.genre_repository import GenreRepository
from moviesapi.repositories.movie_repository import MovieRepository
from moviesapi.schemas.movie import MovieForm, MovieResponse, PosterUpload

logger = logging.getLogger(__name__)

class MovieService:
    """Movie CRUD with poster and genre validation"""

    def __init__(self, movie_store: MovieStoreInterface, genre_store: GenreStoreInterface, poster_policy: PosterPolicy):
        self.movie_store = movie_store
        self.genre_store = genre_store
        self.poster_policy = poster_policy

    @classmethod
    def from_session(cls, db: Session, poster_policy: Optional[PosterPolicy] = None) -> "MovieService":
        """Build a service over SQLAlchemy repositories"""
        return cls(
            MovieRepository(db),
            GenreRepository(db),
            poster_policy or get_settings().poster_policy(),
        )

    def get_all_movies(self) -> List[MovieResponse]:
        """All movies, highest rate first"""
        movies = self.movie_store.list_all(order_by="rate", descending=True)
        return [MovieResponse.model_validate(movie) for movie in movies]

    def get_movie(self, movie_id: int) -> MovieResponse:
        movie = self.movie_store.find_by_id(movie_id)
        if movie is None:
            raise NotFoundException(f"No movie was found with ID {movie_id}")
        return MovieResponse.model_validate(movie)

    def get_movies_by_genre(self, genre_id: int) -> List[MovieResponse]:
        """Movies of one genre, highest rate first; unknown genres yield nothing"""
        movies = self.movie_store.list_where(order_by="rate", descending=True, genre_id=genre_id)
        return [MovieResponse.model_validate(movie) for movie in movies]

    def create_movie(self, form: MovieForm, poster: Optional[PosterUpload]) -> MovieResponse:
        """Validate the poster and genre, then store a new movie"""
        if poster is None:
            self._reject("Poster is required!")
        self._validate_poster(poster)
        self._validate_genre(form.genre_id)

        movie = self.movie_store.insert({
            "title": form.title,
            "story_line": form.story_line,
            "year": form.year,
            "rate": form.rate,
            "genre_id": form.genre_id,
            "poster": poster.content,
        })
        logger.info(f"Movie created with ID: {movie.id}")
        return MovieResponse.model_validate(movie)

    def update_movie(self, movie_id: int, form: MovieForm, poster: Optional[PosterUpload] = None) -> MovieResponse:
        """Overwrite a movie's fields; the stored poster is kept when none is uploaded"""
        movie = self.movie_store.find_by_id(movie_id)
        if movie is None:
            raise NotFoundException(f"No movie was found with ID {movie_id}")

        self._validate_genre(form.genre_id)

        fields = {
            "title": form.title,
            "genre_id": form.genre_id,
            "year": form.year,
            "story_line": form.story_line,
            "rate": form.rate,
        }
        if poster is not None:
            self._validate_poster(poster)
            fields["poster"] = poster.content

        movie = self.movie_store.update(movie, fields)
        logger.info(f"Movie {movie_id} updated")
        return MovieResponse.model_validate(movie)

    def delete_movie(self, movie_id: int) -> MovieResponse:
        """Remove a movie and return its last known state"""
        movie = self.movie_store.find_by_id(movie_id)
        if movie is None:
            raise NotFoundException(f"No movie was found with ID {movie_id}")

        deleted = MovieResponse.model_validate(movie)
        self.movie_store.delete(movie)
        logger.info(f"Movie {movie_id} deleted")
        return deleted

    def _validate_poster(self, poster: PosterUpload) -> None:
        extension = os.path.splitext(poster.filename.lower())[1]
        if extension not in self.poster_policy.allowed_extensions:
            self._reject(f"Only {self.poster_policy.describe_extensions()} images are allowed!")
        if poster.size > self.poster_policy.max_size:
            self._reject(f"Max allowed size for poster is {self.poster_policy.describe_max_size()}")

    def _validate_genre(self, genre_id: int) -> None:
        if not self.genre_store.exists_by_id(genre_id):
            self._reject("Invalid Genre ID!")

    def _reject(self, message: str) -> None:
        logger.warning(f"Rejected movie payload: {message}")
        raise InvalidInputException(message)
