from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session, joinedload
from moviesapi.core.interfaces import MovieStoreInterface
from moviesapi.models.movie import Movie
from moviesapi.repositories.base_repository import BaseRepository

class MovieRepository(BaseRepository[Movie], MovieStoreInterface):
    """Movie repository; every read joins the movie's genre"""

    def __init__(self, db: Session):
        super().__init__(Movie, db)

    def query(self):
        return self.db.query(Movie).options(joinedload(Movie.genre))

    def find_by_id(self, id: int) -> Optional[Movie]:
        return self.get(id)

    def list_all(self, order_by: str = "rate", descending: bool = True) -> List[Movie]:
        return self.get_all(order_by, descending)

    def list_where(self, order_by: str = "rate", descending: bool = True, **filters) -> List[Movie]:
        return self.filter_by(order_by, descending, **filters)

    def insert(self, obj_in: Dict[str, Any]) -> Movie:
        return self.create(obj_in)

    def delete(self, db_obj: Movie) -> None:
        self.remove(db_obj)
