from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
import secrets


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume Profile API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = ""

    # 安全配置
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MS: int = 24 * 60 * 60 * 1000  # 24 hours
    REFRESH_TOKEN_EXPIRE_MS: int = 7 * 24 * 60 * 60 * 1000  # 7 days
    SECURITY_PERMIT_ALL: bool = False

    # 管理员初始化
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_FIRST_NAME: str = "Admin"
    ADMIN_LAST_NAME: str = "User"

    # 数据库配置
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "resume_profiles"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    DATABASE_ECHO: bool = False

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info) -> str:
        if isinstance(v, str) and v:
            return v
        values = info.data if hasattr(info, 'data') else {}
        return f"postgresql+asyncpg://{values.get('POSTGRES_USER', 'postgres')}:{values.get('POSTGRES_PASSWORD', 'postgres')}@{values.get('POSTGRES_SERVER', 'localhost')}:{values.get('POSTGRES_PORT', 5432)}/{values.get('POSTGRES_DB', 'resume_profiles')}"

    # CORS配置
    ALLOWED_HOSTS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:8080",
        "http://localhost:8081",
    ]

    # 日志配置
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def check_token_lifetimes(self) -> "Settings":
        if self.ACCESS_TOKEN_EXPIRE_MS >= self.REFRESH_TOKEN_EXPIRE_MS:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MS must be shorter than REFRESH_TOKEN_EXPIRE_MS")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
