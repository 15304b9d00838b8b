"""
业务异常定义

服务层抛出，由app.core.handlers转换为HTTP响应。
"""

from typing import Dict, Optional


class AppError(Exception):
    """映射到HTTP状态码的业务异常基类"""
    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404
    error = "Not Found"


class DuplicateResourceError(AppError):
    status_code = 409
    error = "Conflict"


class ConflictError(AppError):
    """乐观锁版本不一致"""
    status_code = 409
    error = "Conflict"


class ValidationFailedError(AppError):
    status_code = 400
    error = "Validation Failed"

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors or {}


class InvalidCredentialsError(AppError):
    status_code = 401
    error = "Unauthorized"


class UnknownIdentityError(AppError):
    status_code = 401
    error = "Unauthorized"


class UnauthenticatedError(AppError):
    status_code = 401
    error = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    error = "Forbidden"


class TokenError(AppError):
    status_code = 401
    error = "Unauthorized"


class MalformedTokenError(TokenError):
    pass


class InvalidSignatureError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass
