from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from app.crud.crud_experience import experience as crud_experience
from app.schemas.experience import ExperienceResponse
from app.services import mapper
from app.services.profile_child_service import ProfileChildService
from app.services.profile_service import ProfileService


class ExperienceService(ProfileChildService):
    """工作经历服务类，最近的排在前面"""

    crud = crud_experience
    entity_name = "Experience"
    from_create = staticmethod(mapper.experience_from_create)
    to_response = staticmethod(mapper.experience_to_response)

    @classmethod
    def _respond_all(cls, entities) -> List[ExperienceResponse]:
        return mapper.experiences_to_response(entities)

    @classmethod
    async def get_current_experiences(cls, db: AsyncSession, profile_id: int) -> List[ExperienceResponse]:
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await crud_experience.list_current(db, profile_id))
