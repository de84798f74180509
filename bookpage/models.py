from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Book(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    url: str = ""  # never read from the page, set by the caller
    id: str = ""
    cover_url: str = ""
    authors: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    rating: float = 0.0
    rating_count: int = Field(0, alias="ratings")
    review_count: int = Field(0, alias="reviews")


class Books(BaseModel):
    books: List[Book] = Field(default_factory=list)
