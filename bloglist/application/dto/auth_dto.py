from typing import Optional

from pydantic import BaseModel


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
    username: str
    name: Optional[str] = None
