import base64
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_serializer, field_validator
from moviesapi.schemas.genre import GenreResponse

class MovieForm(BaseModel):
    """Movie fields submitted with a create or update form"""
    title: str = Field(..., max_length=250)
    story_line: str = Field(..., max_length=2500)
    year: int
    rate: float = Field(..., allow_inf_nan=False)
    genre_id: int

class PosterUpload(BaseModel):
    """Poster file read from a multipart upload"""
    filename: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

class MovieResponse(BaseModel):
    """Movie response, poster bytes encoded as base64

    Reads either ORM rows or its own serialized (camelCase, base64) form.
    """
    id: int
    title: str
    story_line: str = Field(
        ...,
        validation_alias=AliasChoices("story_line", "storyLine"),
        serialization_alias="storyLine",
    )
    year: int
    rate: float
    genre_id: int = Field(
        ...,
        validation_alias=AliasChoices("genre_id", "genreId"),
        serialization_alias="genreId",
    )
    genre: Optional[GenreResponse] = None
    poster: Optional[bytes] = None

    class Config:
        from_attributes = True

    @field_validator("poster", mode="before")
    @classmethod
    def decode_poster(cls, poster):
        if isinstance(poster, str):
            return base64.b64decode(poster)
        return poster

    @field_serializer("poster")
    def serialize_poster(self, poster: Optional[bytes]) -> Optional[str]:
        if poster is None:
            return None
        return base64.b64encode(poster).decode("ascii")
