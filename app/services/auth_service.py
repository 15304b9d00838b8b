"""
注册、登录和令牌刷新
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from app.core.exceptions import (
    DuplicateResourceError,
    InvalidCredentialsError,
    TokenError,
    UnknownIdentityError,
)
from app.core.security import TokenIssuer, get_password_hash, verify_password
from app.crud import crud_user
from app.models.user import Role, User
from app.schemas.auth import AuthenticationResponse, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    """认证服务类"""

    @staticmethod
    async def _token_pair(issuer: TokenIssuer, user: User) -> AuthenticationResponse:
        # 签发可能阻塞最多一秒，放到线程池执行
        access_token = await run_in_threadpool(
            issuer.issue_access_token, user.email, {"roles": user.roles}
        )
        refresh_token = await run_in_threadpool(issuer.issue_refresh_token, user.email)
        return AuthenticationResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=issuer.access_expiry_ms,
        )

    @staticmethod
    async def register(
        db: AsyncSession,
        issuer: TokenIssuer,
        request: RegisterRequest
    ) -> AuthenticationResponse:
        """注册USER账号并返回首个令牌对"""
        logger.debug("Registering user %s", request.email)
        if await crud_user.email_exists(db, request.email):
            raise DuplicateResourceError(f"User with email {request.email} already exists")

        user = User(
            email=request.email,
            password_hash=get_password_hash(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
            role=Role.USER,
            enabled=True,
        )
        db.add(user)
        await db.commit()
        logger.info("Registered user %s", user.email)

        return await AuthService._token_pair(issuer, user)

    @staticmethod
    async def authenticate(
        db: AsyncSession,
        issuer: TokenIssuer,
        request: LoginRequest
    ) -> AuthenticationResponse:
        logger.debug("Authenticating user %s", request.email)
        user = await crud_user.get_user_by_email(db, request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            raise InvalidCredentialsError("Invalid email or password")
        if not user.enabled:
            raise InvalidCredentialsError("User account is disabled")

        logger.info("User %s authenticated", user.email)
        return await AuthService._token_pair(issuer, user)

    @staticmethod
    async def refresh(
        db: AsyncSession,
        issuer: TokenIssuer,
        refresh_token: str
    ) -> AuthenticationResponse:
        """用刷新令牌换取新的访问令牌，刷新令牌原样返回"""
        codec = issuer.codec
        try:
            subject = codec.extract_subject(refresh_token)
        except TokenError as e:
            logger.warning("Refresh rejected: %s", e.message)
            raise InvalidCredentialsError("Invalid refresh token") from e

        user = await crud_user.get_user_by_email(db, subject) if subject else None
        if user is None:
            raise UnknownIdentityError("User not found")
        if not user.enabled:
            raise InvalidCredentialsError("User account is disabled")

        if not codec.is_valid_for(refresh_token, user.email):
            raise InvalidCredentialsError("Invalid refresh token")

        access_token = await run_in_threadpool(
            issuer.issue_access_token, user.email, {"roles": user.roles}
        )
        logger.info("Refreshed access token for %s", user.email)
        return AuthenticationResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=issuer.access_expiry_ms,
        )
