"""
请求认证与路由授权
"""

import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from app.core.config import settings
from app.core.exceptions import AppError, ForbiddenError, TokenError, UnauthenticatedError
from app.core.handlers import error_response
from app.crud import crud_user
from app.db.base import AsyncSessionLocal
from app.models.user import Role

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

PUBLIC_PATHS = {"/", "/health", "/docs", "/redoc", "/openapi.json", "/docs/oauth2-redirect"}
READ_ONLY_METHODS = {"GET", "HEAD", "OPTIONS"}


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    将Bearer令牌（如有）解析为已启用的用户。

    设置request.state.user和request.state.roles。任何失败都按匿名请求处理，
    本中间件自身不拒绝请求。
    """

    async def dispatch(self, request: Request, call_next):
        request.state.user = None
        request.state.roles = []

        header = request.headers.get("Authorization")
        if header and header.startswith(BEARER_PREFIX):
            token = header[len(BEARER_PREFIX):].strip()
            try:
                await self._authenticate(request, token)
            except TokenError as e:
                logger.warning("Bearer token rejected for %s: %s", request.url.path, e.message)
            except Exception:
                logger.exception("Cannot set user authentication for %s", request.url.path)

        return await call_next(request)

    @staticmethod
    async def _authenticate(request: Request, token: str) -> None:
        codec = request.app.state.token_codec
        subject = codec.extract_subject(token)
        if not subject:
            return

        async with AsyncSessionLocal() as db:
            user = await crud_user.get_user_by_email(db, subject)

        if user is None:
            logger.warning("Token subject %s has no user", subject)
            return
        if not user.enabled:
            logger.warning("User %s is disabled", subject)
            return
        if codec.is_valid_for(token, user.email):
            request.state.user = user
            request.state.roles = user.roles
            logger.debug("Authenticated %s for %s", user.email, request.url.path)


def relative_path(path: str) -> str:
    prefix = settings.API_PREFIX.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        return path[len(prefix):] or "/"
    return path


def is_public(method: str, path: str) -> bool:
    if path in PUBLIC_PATHS:
        return True
    path = relative_path(path)
    if path in PUBLIC_PATHS:
        return True
    if path == "/auth" or path.startswith("/auth/"):
        return True
    if method in READ_ONLY_METHODS and (path == "/profiles" or path.startswith("/profiles/")):
        return True
    return False


class AuthorizationMiddleware(BaseHTTPMiddleware):
    """公开路由直接放行，其余路由需要已认证的ADMIN"""

    async def dispatch(self, request: Request, call_next):
        if settings.SECURITY_PERMIT_ALL or is_public(request.method, request.url.path):
            return await call_next(request)

        user = getattr(request.state, "user", None)
        if user is None:
            return self._reject(request, UnauthenticatedError(
                "Authentication is required to access this resource"
            ))
        if Role.ADMIN.value not in getattr(request.state, "roles", []):
            return self._reject(request, ForbiddenError(
                "You do not have permission to access this resource"
            ))
        return await call_next(request)

    @staticmethod
    def _reject(request: Request, exc: AppError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.error, exc.message, request.url.path)
