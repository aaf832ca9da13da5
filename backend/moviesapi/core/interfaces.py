from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class MovieStoreInterface(ABC):
    """Abstract interface for movie persistence"""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Any]:
        pass

    @abstractmethod
    def list_all(self, order_by: str = "rate", descending: bool = True) -> List[Any]:
        pass

    @abstractmethod
    def list_where(self, order_by: str = "rate", descending: bool = True, **filters) -> List[Any]:
        pass

    @abstractmethod
    def insert(self, obj_in: Dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def update(self, db_obj: Any, obj_in: Dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def delete(self, db_obj: Any) -> None:
        pass


class GenreStoreInterface(ABC):
    """Abstract interface for genre persistence"""

    @abstractmethod
    def exists_by_id(self, id: int) -> bool:
        pass

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Any]:
        pass

    @abstractmethod
    def list_all(self, order_by: str = "name", descending: bool = False) -> List[Any]:
        pass

    @abstractmethod
    def insert(self, obj_in: Dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def update(self, db_obj: Any, obj_in: Dict[str, Any]) -> Any:
        pass
