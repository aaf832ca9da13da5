from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from moviesapi.core.interfaces import GenreStoreInterface
from moviesapi.models.genre import Genre
from moviesapi.repositories.base_repository import BaseRepository

class GenreRepository(BaseRepository[Genre], GenreStoreInterface):
    """Genre repository"""

    def __init__(self, db: Session):
        super().__init__(Genre, db)

    def exists_by_id(self, id: int) -> bool:
        return self.exists(id=id)

    def find_by_id(self, id: int) -> Optional[Genre]:
        return self.get(id)

    def list_all(self, order_by: str = "name", descending: bool = False) -> List[Genre]:
        return self.get_all(order_by, descending)

    def insert(self, obj_in: Dict[str, Any]) -> Genre:
        return self.create(obj_in)

    def get_by_name(self, name: str) -> Optional[Genre]:
        """Get genre by exact name"""
        return self.db.query(Genre).filter_by(name=name).first()
