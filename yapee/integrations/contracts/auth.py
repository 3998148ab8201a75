from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """
    Authenticated storefront user.

    Created by the mock login handler; there is no credential store behind it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    username: str
    email: str
    name: str
    avatar: Optional[str] = None
    role: Role = Role.USER
    created_at: datetime = Field(..., alias="createdAt")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class LoginRequest(BaseModel):
    username: str = Field(..., description="Login name; the email is derived from it")
    password: str = ""
