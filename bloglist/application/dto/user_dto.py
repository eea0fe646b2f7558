from typing import List, Optional

from pydantic import BaseModel, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=3, max_length=100)
    name: Optional[str] = Field(default=None, max_length=200)
    password: str = Field(min_length=3, max_length=256)


class UserResponse(BaseModel):
    """DTO for user response (no password hash)"""
    id: str
    username: str
    name: Optional[str] = None
    blog_ids: List[str] = []
