from pydantic import BaseModel, Field
from typing import Optional

from apps.user.models import NAME_MAX_LENGTH, USERNAME_MAX_LENGTH

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_LENGTH = 72


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=USERNAME_MAX_LENGTH)
    name: Optional[str] = Field(None, max_length=NAME_MAX_LENGTH)
    password: str = Field(..., min_length=3, max_length=PASSWORD_MAX_LENGTH, repr=False)


class UserOut(BaseModel):
    id: str
    username: str
    name: Optional[str] = None
