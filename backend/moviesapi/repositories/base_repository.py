from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy import BigInteger, Integer, SmallInteger
from sqlalchemy.orm import Session
from moviesapi.db import Base

ModelType = TypeVar("ModelType", bound=Base)

# Subclasses of Integer come first
INTEGER_LIMITS = ((BigInteger, 2 ** 63), (SmallInteger, 2 ** 15), (Integer, 2 ** 31))

class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations"""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def query(self):
        return self.db.query(self.model)

    def ordered(self, query, order_by: str, descending: bool):
        column = getattr(self.model, order_by)
        return query.order_by(column.desc() if descending else column.asc())

    def in_column_range(self, field: str, value: Any) -> bool:
        """Integer values outside the column type's range cannot match any row"""
        if not isinstance(value, int):
            return True
        column_type = getattr(self.model, field).type
        for integer_type, limit in INTEGER_LIMITS:
            if isinstance(column_type, integer_type):
                return -limit <= value < limit
        return True

    def get(self, id: Any) -> Optional[ModelType]:
        """Get by ID"""
        if not self.in_column_range("id", id):
            return None
        return self.query().filter(self.model.id == id).first()

    def get_all(self, order_by: str = "id", descending: bool = False) -> List[ModelType]:
        """Get all rows in the given order"""
        return self.ordered(self.query(), order_by, descending).all()

    def filter_by(self, order_by: str = "id", descending: bool = False, **kwargs) -> List[ModelType]:
        """Filter by multiple conditions"""
        if not all(self.in_column_range(field, value) for field, value in kwargs.items()):
            return []
        return self.ordered(self.query().filter_by(**kwargs), order_by, descending).all()

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """Create new object"""
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """Update object"""
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def remove(self, db_obj: ModelType) -> None:
        """Delete a loaded object"""
        self.db.delete(db_obj)
        self._commit()

    def exists(self, **kwargs) -> bool:
        """Check if object exists"""
        if not all(self.in_column_range(field, value) for field, value in kwargs.items()):
            return False
        return self.db.query(self.model).filter_by(**kwargs).first() is not None

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
