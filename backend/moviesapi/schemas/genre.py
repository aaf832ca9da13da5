from pydantic import BaseModel, Field

class GenreCreate(BaseModel):
    """Create or rename a genre"""
    name: str = Field(..., min_length=1, max_length=100, description="Genre name")

class GenreResponse(BaseModel):
    """Genre response"""
    id: int
    name: str

    class Config:
        from_attributes = True
