import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.handlers import register_exception_handlers
from app.core.middleware import AuthenticationMiddleware, AuthorizationMiddleware
from app.core.security import TokenCodec, TokenIssuer
from app.api.v1.api import api_router
from app.db.init_db import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

# SQL 输出由 DATABASE_ECHO 控制，不跟随根日志级别
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
logging.getLogger('passlib').setLevel(logging.ERROR)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Resume profile API with JWT authentication",
    lifespan=lifespan
)

# 每个应用一组令牌编解码器/签发器
app.state.token_codec = TokenCodec(settings.SECRET_KEY, settings.ALGORITHM)
app.state.token_issuer = TokenIssuer(
    app.state.token_codec,
    settings.ACCESS_TOKEN_EXPIRE_MS,
    settings.REFRESH_TOKEN_EXPIRE_MS,
)

# 中间件由内向外添加：CORS -> 认证 -> 授权 -> 路由
app.add_middleware(AuthorizationMiddleware)
app.add_middleware(AuthenticationMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 包含API路由
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {"message": settings.PROJECT_NAME, "version": settings.VERSION}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
