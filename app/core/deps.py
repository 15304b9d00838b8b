"""
FastAPI依赖函数
"""

from fastapi import Request
from app.core.exceptions import UnauthenticatedError
from app.core.security import TokenIssuer
from app.models.user import User


def get_token_issuer(request: Request) -> TokenIssuer:
    """获取应用唯一的令牌签发器"""
    return request.app.state.token_issuer


async def get_current_user(request: Request) -> User:
    """获取认证中间件确定的当前用户"""
    user = getattr(request.state, "user", None)
    if user is None:
        raise UnauthenticatedError("Authentication is required to access this resource")
    return user
