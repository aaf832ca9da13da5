from sqlalchemy import Column, Integer, SmallInteger, String
from sqlalchemy.orm import relationship
from moviesapi.db import Base

class Genre(Base):
    __tablename__ = "genres"
    # SQLite only autoincrements INTEGER primary keys
    id = Column(SmallInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    movies = relationship("Movie", back_populates="genre")

    def __repr__(self):
        return f"<Genre(id={self.id}, name='{self.name}')>"
