from sqlalchemy import Column, Float, ForeignKey, Integer, LargeBinary, SmallInteger, String
from sqlalchemy.orm import relationship
from moviesapi.db import Base

class Movie(Base):
    __tablename__ = "movies"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(250), nullable=False)
    story_line = Column(String(2500), nullable=False)
    year = Column(Integer, nullable=False)
    rate = Column(Float, nullable=False, index=True)
    poster = Column(LargeBinary, nullable=False)
    genre_id = Column(SmallInteger, ForeignKey("genres.id"), nullable=False, index=True)

    genre = relationship("Genre", back_populates="movies")

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}', rate={self.rate})>"
