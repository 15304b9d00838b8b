"""
密码加密和JWT令牌处理
"""

import logging
import threading
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from app.core.exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenError,
)

logger = logging.getLogger(__name__)

# 密码加密上下文
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# JWT算法
ALGORITHM = "HS256"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """生成密码哈希"""
    return pwd_context.hash(password)


class TokenCodec:
    """签发和校验携带subject与唯一jti的JWT"""

    def __init__(self, secret_key: str, algorithm: str = ALGORITHM):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def encode(
        self,
        subject: str,
        expiry_ms: int,
        extra_claims: Optional[Dict[str, Any]] = None,
        issued_at: Optional[float] = None,
    ) -> str:
        """为subject生成签名令牌，issued_at之后expiry_ms毫秒过期"""
        if issued_at is None:
            issued_at = time.time()

        to_encode = dict(extra_claims or {})
        to_encode.update({
            "sub": subject,
            "iat": int(issued_at),
            "exp": int(issued_at + expiry_ms / 1000),
            "jti": str(uuid.uuid4()),
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str, verify_exp: bool = True) -> Dict[str, Any]:
        """
        校验结构、签名以及（可选）过期时间，返回claims。

        失败时抛出 MalformedTokenError、InvalidSignatureError 或 ExpiredTokenError。
        """
        try:
            jwt.get_unverified_claims(token)
        except (JWTError, AttributeError) as e:
            raise MalformedTokenError(f"Malformed token: {e}") from e

        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": verify_exp},
            )
        except ExpiredSignatureError as e:
            raise ExpiredTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidSignatureError(f"Token signature is invalid: {e}") from e

    def extract_subject(self, token: str) -> Optional[str]:
        return self.decode(token).get("sub")

    def extract_expiration(self, token: str) -> datetime:
        claims = self.decode(token, verify_exp=False)
        return datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

    def is_expired(self, token: str) -> bool:
        return self.extract_expiration(token) < datetime.now(timezone.utc)

    def is_valid_for(self, token: str, subject: str) -> bool:
        """令牌属于subject且未过期时返回True，不抛异常"""
        try:
            claims = self.decode(token)
        except TokenError as e:
            logger.warning("Token validation failed: %s", e.message)
            return False
        is_valid = claims.get("sub") == subject
        logger.debug("Token validation for %s: %s", subject, is_valid)
        return is_valid


class TokenIssuer:
    """
    签发访问令牌和刷新令牌。

    所有调用通过同一把锁串行执行。与上一个令牌落在同一秒内的调用会等到下一秒，
    保证任意两个令牌的签发时间都不相同。每个令牌还带有随机jti。
    """

    def __init__(
        self,
        codec: TokenCodec,
        access_expiry_ms: int,
        refresh_expiry_ms: int,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if access_expiry_ms >= refresh_expiry_ms:
            raise ValueError("access token lifetime must be shorter than refresh token lifetime")
        self.codec = codec
        self.access_expiry_ms = access_expiry_ms
        self.refresh_expiry_ms = refresh_expiry_ms
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_issued_second = 0

    def issue_access_token(self, subject: str, extra_claims: Optional[Dict[str, Any]] = None) -> str:
        return self._issue(subject, self.access_expiry_ms, extra_claims)

    def issue_refresh_token(self, subject: str) -> str:
        return self._issue(subject, self.refresh_expiry_ms)

    def _issue(self, subject: str, expiry_ms: int, extra_claims: Optional[Dict[str, Any]] = None) -> str:
        with self._lock:
            now = self._clock()
            if int(now) <= self._last_issued_second:
                # 当前秒剩余时间加1毫秒
                self._sleep(1 - (now % 1) + 0.001)
                now = self._clock()

            self._last_issued_second = int(now)
            logger.debug("Generating token for %s with iat: %s", subject, int(now))
            return self.codec.encode(subject, expiry_ms, extra_claims, issued_at=now)
