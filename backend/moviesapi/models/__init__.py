from moviesapi.db import Base
from .genre import Genre
from .movie import Movie

__all__ = ['Base', 'Genre', 'Movie']
