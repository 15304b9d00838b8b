"""
认证相关API路由
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.deps import get_current_user, get_token_issuer
from app.core.exceptions import UnauthenticatedError
from app.core.security import TokenIssuer
from app.db.deps import get_db
from app.models.user import User
from app.schemas.auth import AuthenticationResponse, LoginRequest, RegisterRequest, UserResponse
from app.services.auth_service import AuthService

router = APIRouter()

# 刷新令牌通过Authorization请求头传递
refresh_scheme = HTTPBearer(auto_error=False)


@router.post("/register", response_model=AuthenticationResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """
    注册新用户
    """
    return await AuthService.register(db, issuer, request)


@router.post("/login", response_model=AuthenticationResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """
    邮箱密码登录
    """
    return await AuthService.authenticate(db, issuer, request)


@router.post("/refresh", response_model=AuthenticationResponse)
async def refresh(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(refresh_scheme),
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """
    使用刷新令牌获取新的访问令牌
    """
    if credentials is None:
        raise UnauthenticatedError("Refresh token is required")
    return await AuthService.refresh(db, issuer, credentials.credentials)


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)):
    """
    获取当前用户信息
    """
    return UserResponse.model_validate(current_user)
