# mainstreet_admin/schemas/user.py

from pydantic import EmailStr
from typing import Literal
from mainstreet_admin.schemas.base import CamelModel

class UserBase(CamelModel):
    email: EmailStr

class UserCreate(UserBase):
    password: str
    role: Literal["user", "admin"] = "user"

class User(UserBase):
    id: int
    role: str

class LoginRequest(CamelModel):
    email: str
    password: str

class Token(CamelModel):
    token: str
    token_type: str = "bearer"
    user: User
