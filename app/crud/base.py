"""
档案子实体的通用查询
"""

from typing import Generic, List, Optional, Sequence, Type, TypeVar
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDProfileChild(Generic[ModelType]):
    """按profile_id归属的子集合数据访问"""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def default_order(self) -> Sequence:
        return (self.model.display_order, self.model.id)

    async def get_by_id_and_profile(
        self, db: AsyncSession, child_id: int, profile_id: int
    ) -> Optional[ModelType]:
        stmt = select(self.model).where(
            self.model.id == child_id,
            self.model.profile_id == profile_id
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_profile(self, db: AsyncSession, profile_id: int) -> List[ModelType]:
        stmt = select(self.model).where(
            self.model.profile_id == profile_id
        ).order_by(*self.default_order())
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def find_by_ids_for_profile(
        self, db: AsyncSession, ids: Sequence[int], profile_id: int
    ) -> List[ModelType]:
        if not ids:
            return []
        stmt = select(self.model).where(
            self.model.id.in_(ids),
            self.model.profile_id == profile_id
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def max_display_order(self, db: AsyncSession, profile_id: int) -> int:
        stmt = select(func.max(self.model.display_order)).where(
            self.model.profile_id == profile_id
        )
        result = await db.execute(stmt)
        return result.scalar() or 0

    async def delete_by_profile(self, db: AsyncSession, profile_id: int) -> int:
        stmt = delete(self.model).where(self.model.profile_id == profile_id)
        result = await db.execute(stmt)
        return result.rowcount or 0
