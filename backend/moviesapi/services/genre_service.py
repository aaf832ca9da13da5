import logging
from typing import List
from sqlalchemy.orm import Session
from moviesapi.core.exceptions import NotFoundException
from moviesapi.core.interfaces import GenreStoreInterface
from moviesapi.repositories.genre_repository import GenreRepository
from moviesapi.schemas.genre import GenreCreate, GenreResponse

logger = logging.getLogger(__name__)

class GenreService:
    """Service for the genre lookup table"""

    def __init__(self, genre_store: GenreStoreInterface):
        self.genre_store = genre_store

    @classmethod
    def from_session(cls, db: Session) -> "GenreService":
        return cls(GenreRepository(db))

    def get_all_genres(self) -> List[GenreResponse]:
        """Get genres ordered by name"""
        genres = self.genre_store.list_all(order_by="name")
        return [GenreResponse.model_validate(genre) for genre in genres]

    def create_genre(self, genre_data: GenreCreate) -> GenreResponse:
        genre = self.genre_store.insert({"name": genre_data.name})
        logger.info(f"Genre created with ID: {genre.id}")
        return GenreResponse.model_validate(genre)

    def update_genre(self, genre_id: int, genre_data: GenreCreate) -> GenreResponse:
        genre = self.genre_store.find_by_id(genre_id)
        if genre is None:
            raise NotFoundException(f"No genre was found with ID {genre_id}")

        genre = self.genre_store.update(genre, {"name": genre_data.name})
        logger.info(f"Genre {genre_id} renamed to '{genre.name}'")
        return GenreResponse.model_validate(genre)
