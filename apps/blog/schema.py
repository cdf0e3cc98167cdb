from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from apps.blog.models import AUTHOR_MAX_LENGTH, TITLE_MAX_LENGTH, URL_MAX_LENGTH
from utils.store import MAX_STORE_INT


class BlogCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    author: Optional[str] = Field(None, max_length=AUTHOR_MAX_LENGTH)
    url: str = Field(..., min_length=1, max_length=URL_MAX_LENGTH)
    likes: int = Field(0, ge=0, le=MAX_STORE_INT)

    @field_validator('likes', mode='before')
    @classmethod
    def default_likes(cls, value):
        return 0 if value is None else value


class BlogOut(BaseModel):
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int
