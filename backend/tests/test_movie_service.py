# tests/test_movie_service.py
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from moviesapi.core.config import PosterPolicy
from moviesapi.core.exceptions import InvalidInputException, NotFoundException
from moviesapi.core.interfaces import GenreStoreInterface, MovieStoreInterface
from moviesapi.schemas.movie import MovieForm, PosterUpload
from moviesapi.services.movie_service import MovieService


class InMemoryGenreStore(GenreStoreInterface):
    def __init__(self, names: Dict[int, str]):
        self.rows = {id: SimpleNamespace(id=id, name=name) for id, name in names.items()}

    def exists_by_id(self, id: int) -> bool:
        return id in self.rows

    def find_by_id(self, id: int) -> Optional[Any]:
        return self.rows.get(id)

    def list_all(self, order_by: str = "name", descending: bool = False) -> List[Any]:
        return sorted(self.rows.values(), key=lambda row: getattr(row, order_by), reverse=descending)

    def insert(self, obj_in: Dict[str, Any]) -> Any:
        row = SimpleNamespace(id=max(self.rows, default=0) + 1, **obj_in)
        self.rows[row.id] = row
        return row

    def update(self, db_obj: Any, obj_in: Dict[str, Any]) -> Any:
        for field, value in obj_in.items():
            setattr(db_obj, field, value)
        return db_obj


class InMemoryMovieStore(MovieStoreInterface):
    def __init__(self, genres: InMemoryGenreStore):
        self.genres = genres
        self.rows: Dict[int, Any] = {}
        self.next_id = 1

    def _join(self, row):
        row.genre = self.genres.find_by_id(row.genre_id)
        return row

    def find_by_id(self, id: int) -> Optional[Any]:
        row = self.rows.get(id)
        return self._join(row) if row else None

    def list_all(self, order_by: str = "rate", descending: bool = True) -> List[Any]:
        return self.list_where(order_by, descending)

    def list_where(self, order_by: str = "rate", descending: bool = True, **filters) -> List[Any]:
        rows = [
            row for row in self.rows.values()
            if all(getattr(row, field) == value for field, value in filters.items())
        ]
        rows.sort(key=lambda row: getattr(row, order_by), reverse=descending)
        return [self._join(row) for row in rows]

    def insert(self, obj_in: Dict[str, Any]) -> Any:
        row = SimpleNamespace(id=self.next_id, **obj_in)
        self.next_id += 1
        self.rows[row.id] = row
        return self._join(row)

    def update(self, db_obj: Any, obj_in: Dict[str, Any]) -> Any:
        for field, value in obj_in.items():
            setattr(db_obj, field, value)
        return self._join(db_obj)

    def delete(self, db_obj: Any) -> None:
        del self.rows[db_obj.id]


@pytest.fixture
def service():
    genres = InMemoryGenreStore({1: "Action", 2: "Drama"})
    return MovieService(InMemoryMovieStore(genres), genres, PosterPolicy())


def form(**overrides) -> MovieForm:
    fields = {"title": "Inception", "story_line": "Dreams.", "year": 2010, "rate": 8.8, "genre_id": 1}
    fields.update(overrides)
    return MovieForm(**fields)


def poster(filename="poster.jpg", content=b"\xff\xd8\xff") -> PosterUpload:
    return PosterUpload(filename=filename, content=content)


def test_create_and_get(service):
    created = service.create_movie(form(), poster())
    assert created.id == 1
    assert created.genre.name == "Action"
    assert service.get_movie(created.id) == created


def test_create_requires_poster(service):
    with pytest.raises(InvalidInputException) as exc_info:
        service.create_movie(form(), None)
    assert exc_info.value.message == "Poster is required!"
    assert exc_info.value.status_code == 400


def test_custom_policy_is_honoured():
    genres = InMemoryGenreStore({1: "Action"})
    policy = PosterPolicy(allowed_extensions=frozenset({".webp"}), max_size=4)
    service = MovieService(InMemoryMovieStore(genres), genres, policy)

    with pytest.raises(InvalidInputException) as exc_info:
        service.create_movie(form(), poster("poster.jpg"))
    assert exc_info.value.message == "Only .webp images are allowed!"

    with pytest.raises(InvalidInputException) as exc_info:
        service.create_movie(form(), poster("poster.webp", b"12345"))
    assert exc_info.value.message.startswith("Max allowed size for poster is")

    assert service.create_movie(form(), poster("poster.webp", b"1234")).poster == b"1234"


def test_get_missing_movie(service):
    with pytest.raises(NotFoundException) as exc_info:
        service.get_movie(7)
    assert exc_info.value.status_code == 404


def test_by_genre_uses_rate_order(service):
    service.create_movie(form(title="Low", rate=5.0), poster())
    service.create_movie(form(title="High", rate=9.0), poster())
    service.create_movie(form(title="Other", rate=9.5, genre_id=2), poster())

    assert [movie.title for movie in service.get_movies_by_genre(1)] == ["High", "Low"]
    assert [movie.title for movie in service.get_all_movies()] == ["Other", "High", "Low"]
    assert service.get_movies_by_genre(3) == []


def test_update_keeps_poster_when_omitted(service):
    created = service.create_movie(form(), poster(content=b"original"))
    updated = service.update_movie(created.id, form(title="Renamed", genre_id=2))
    assert updated.title == "Renamed"
    assert updated.genre.name == "Drama"
    assert updated.poster == b"original"


def test_update_checks_existence_before_genre(service):
    with pytest.raises(NotFoundException):
        service.update_movie(5, form(genre_id=99))


def test_delete_then_get(service):
    created = service.create_movie(form(), poster())
    deleted = service.delete_movie(created.id)
    assert deleted.id == created.id
    with pytest.raises(NotFoundException):
        service.get_movie(created.id)
    with pytest.raises(NotFoundException) as exc_info:
        service.delete_movie(created.id)
    assert exc_info.value.message == f"No movie was found with ID {created.id}"
