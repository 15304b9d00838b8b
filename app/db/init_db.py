"""
数据库初始化：建表并创建管理员账号
"""

import logging
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from app.core.config import settings
from app.core.security import get_password_hash
from app.crud import crud_user
from app.db.base import AsyncSessionLocal, async_engine
from app.models import Base, Role, User

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine = async_engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ensure_admin_user(db: AsyncSession) -> None:
    """创建配置的管理员账号（如不存在）"""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin bootstrap")
        return

    if await crud_user.email_exists(db, settings.ADMIN_EMAIL):
        return

    db.add(User(
        email=settings.ADMIN_EMAIL,
        password_hash=get_password_hash(settings.ADMIN_PASSWORD),
        first_name=settings.ADMIN_FIRST_NAME,
        last_name=settings.ADMIN_LAST_NAME,
        role=Role.ADMIN,
        enabled=True,
    ))
    await db.commit()
    logger.info("Created admin user %s", settings.ADMIN_EMAIL)


async def init_db() -> None:
    """创建所有数据表并初始化管理员"""
    await create_tables()
    async with AsyncSessionLocal() as db:
        await ensure_admin_user(db)


if __name__ == "__main__":
    import asyncio
    asyncio.run(init_db())
