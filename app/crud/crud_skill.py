from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.crud.base import CRUDProfileChild
from app.models.skill import Skill, SkillCategory


class CRUDSkill(CRUDProfileChild[Skill]):

    async def list_by_category(
        self, db: AsyncSession, profile_id: int, category: SkillCategory
    ) -> List[Skill]:
        stmt = select(Skill).where(
            Skill.profile_id == profile_id,
            Skill.category == category
        ).order_by(*self.default_order())
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def list_primary(self, db: AsyncSession, profile_id: int) -> List[Skill]:
        stmt = select(Skill).where(
            Skill.profile_id == profile_id,
            Skill.primary.is_(True)
        ).order_by(*self.default_order())
        result = await db.execute(stmt)
        return list(result.scalars().all())


skill = CRUDSkill(Skill)
