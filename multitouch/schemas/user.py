# File: multitouch/schemas/user.py

from typing import Optional

from pydantic import BaseModel, EmailStr


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    username: str
    password: str


class UserCreateFull(UserBase):
    password: str
    legal_name: str
    institution: str


class UserLogin(UserBase):
    password: str


class UserUpdate(UserBase):
    username: str
    password: str
    legal_name: Optional[str] = None
    institution: Optional[str] = None


class UserIdRead(BaseModel):
    uid: int


class UserRead(BaseModel):
    # Password is never echoed back.
    id: int
    username: Optional[str] = None
    email: Optional[str] = None
    legal_name: Optional[str] = None
    institution: Optional[str] = None
    extra_field: Optional[str] = None


class ProjectIdsRead(BaseModel):
    pids: list[int]
