from typing import Annotated
from datetime import datetime
from pydantic import Field, StringConstraints
from app.schemas.base import APIModel

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]
PasswordStr = Annotated[str, Field(min_length=1, max_length=128)]

class UserCredentials(APIModel):
    username: UsernameStr
    password: PasswordStr

class UserRead(APIModel):
    user_id: int
    username: str
    created_at: datetime

class TokenUser(APIModel):
    user_id: int
    username: str

class SignInResponse(APIModel):
    token: str
    user: TokenUser
