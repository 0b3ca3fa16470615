"""User schemas."""

from typing import Optional

from fastapi_users import schemas
from pydantic import BaseModel, EmailStr, Field


class UserRead(schemas.BaseUser[int]):
    id: int
    name: str
    email: EmailStr
    is_active: bool = True
    is_superuser: bool = False
    is_verified: bool = False


class UserPublic(BaseModel):
    id: int
    name: str
    email: EmailStr

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Store Owner',
                'email': 'owner@simplestock.com',
            }
        }


class UserCreate(schemas.BaseUserCreate):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)

    def __repr__(self) -> str:
        return f"UserCreate(email='{self.email}', password='********', name='{self.name}')"

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'owner@simplestock.com',
                'name': 'Store Owner',
                'password': 'P@ssw0rd',
            }
        }


class UserUpdate(schemas.BaseUserUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
