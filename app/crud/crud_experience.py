from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.crud.base import CRUDProfileChild
from app.models.experience import Experience


class CRUDExperience(CRUDProfileChild[Experience]):

    def default_order(self):
        return (Experience.start_date.desc(), Experience.id)

    async def list_current(self, db: AsyncSession, profile_id: int) -> List[Experience]:
        stmt = select(Experience).where(
            Experience.profile_id == profile_id,
            Experience.current.is_(True)
        ).order_by(*self.default_order())
        result = await db.execute(stmt)
        return list(result.scalars().all())


experience = CRUDExperience(Experience)
