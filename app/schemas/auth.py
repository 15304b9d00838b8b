"""
认证相关数据模型
"""

from datetime import datetime
from typing import List
from pydantic import EmailStr, Field
from app.models.user import Role
from app.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """注册请求"""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class LoginRequest(CamelModel):
    """登录请求"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthenticationResponse(CamelModel):
    """注册、登录和刷新返回的令牌对"""
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: Role
    roles: List[str]
    enabled: bool
    created_at: datetime
