from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.crud.crud_skill import skill as crud_skill
from app.models.skill import SkillCategory
from app.schemas.skill import SkillResponse
from app.services import mapper
from app.services.profile_child_service import ProfileChildService
from app.services.profile_service import ProfileService


class SkillService(ProfileChildService):
    """技能服务类，按显示顺序返回"""

    crud = crud_skill
    entity_name = "Skill"
    from_create = staticmethod(mapper.skill_from_create)
    to_response = staticmethod(mapper.skill_to_response)

    @classmethod
    async def list_skills(
        cls,
        db: AsyncSession,
        profile_id: int,
        category: Optional[SkillCategory] = None
    ) -> List[SkillResponse]:
        if category is None:
            return await cls.list(db, profile_id)
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await crud_skill.list_by_category(db, profile_id, category))

    @classmethod
    async def get_primary_skills(cls, db: AsyncSession, profile_id: int) -> List[SkillResponse]:
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await crud_skill.list_primary(db, profile_id))
