from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from app.models.profile import Profile


def _with_collections(stmt):
    # 每个集合一次 SELECT ... IN 查询，避免多个一对多关系的联表
    return stmt.options(
        selectinload(Profile.experiences),
        selectinload(Profile.educations),
        selectinload(Profile.skills),
        selectinload(Profile.certifications),
    ).execution_options(populate_existing=True)


async def get_profile(db: AsyncSession, profile_id: int) -> Optional[Profile]:
    stmt = select(Profile).where(Profile.id == profile_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_profile_with_all_relations(db: AsyncSession, profile_id: int) -> Optional[Profile]:
    stmt = _with_collections(select(Profile).where(Profile.id == profile_id))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_profile_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
    stmt = _with_collections(select(Profile).where(Profile.email == email))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_active_profiles(db: AsyncSession) -> List[Profile]:
    stmt = _with_collections(
        select(Profile).where(Profile.active.is_(True)).order_by(Profile.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def profile_exists(db: AsyncSession, profile_id: int) -> bool:
    stmt = select(Profile.id).where(Profile.id == profile_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none() is not None


async def email_taken(db: AsyncSession, email: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Profile.id).where(Profile.email == email)
    if exclude_id is not None:
        stmt = stmt.where(Profile.id != exclude_id)
    result = await db.execute(stmt)
    return result.first() is not None
