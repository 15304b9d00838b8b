"""
简历档案服务
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import ConflictError, DuplicateResourceError, NotFoundError
from app.crud import crud_profile
from app.models.profile import Profile
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.services import mapper

logger = logging.getLogger(__name__)


def check_version(entity, expected: Optional[int]) -> None:
    """拒绝基于过期版本的更新"""
    if expected is not None and entity.version != expected:
        raise ConflictError(
            f"{type(entity).__name__} {entity.id} was modified concurrently "
            f"(expected version {expected}, found {entity.version})"
        )


class ProfileService:
    """简历档案服务类"""

    @staticmethod
    async def _load(db: AsyncSession, profile_id: int) -> Profile:
        profile = await crud_profile.get_profile_with_all_relations(db, profile_id)
        if profile is None:
            raise NotFoundError(f"Profile not found with id: {profile_id}")
        return profile

    @staticmethod
    async def ensure_exists(db: AsyncSession, profile_id: int) -> None:
        if not await crud_profile.profile_exists(db, profile_id):
            raise NotFoundError(f"Profile not found with id: {profile_id}")

    @staticmethod
    async def create_profile(db: AsyncSession, request: ProfileCreate) -> ProfileResponse:
        logger.debug("Creating profile for email %s", request.email)
        if await crud_profile.email_taken(db, request.email):
            raise DuplicateResourceError(f"Profile with email {request.email} already exists")

        profile = mapper.profile_from_create(request)
        db.add(profile)
        await db.commit()
        logger.info("Created profile %s for %s", profile.id, profile.email)

        return mapper.profile_to_response(await ProfileService._load(db, profile.id))

    @staticmethod
    async def get_profile_by_id(db: AsyncSession, profile_id: int) -> ProfileResponse:
        logger.debug("Fetching profile %s", profile_id)
        return mapper.profile_to_response(await ProfileService._load(db, profile_id))

    @staticmethod
    async def get_profile_by_email(db: AsyncSession, email: str) -> ProfileResponse:
        logger.debug("Fetching profile by email %s", email)
        profile = await crud_profile.get_profile_by_email(db, email)
        if profile is None:
            raise NotFoundError(f"Profile not found with email: {email}")
        return mapper.profile_to_response(profile)

    @staticmethod
    async def get_active_profiles(db: AsyncSession) -> List[ProfileResponse]:
        profiles = await crud_profile.get_active_profiles(db)
        return [mapper.profile_to_response(p) for p in profiles]

    @staticmethod
    async def get_profile_with_all_relations(db: AsyncSession, profile_id: int) -> ProfileResponse:
        """获取档案及全部子集合，每个集合单独查询"""
        return mapper.profile_to_response(await ProfileService._load(db, profile_id))

    @staticmethod
    async def update_profile(
        db: AsyncSession,
        profile_id: int,
        request: ProfileUpdate
    ) -> ProfileResponse:
        logger.debug("Updating profile %s", profile_id)
        profile = await ProfileService._load(db, profile_id)
        check_version(profile, request.version)

        if request.email is not None and request.email != profile.email:
            if await crud_profile.email_taken(db, request.email, exclude_id=profile_id):
                raise DuplicateResourceError(f"Email {request.email} is already in use")

        mapper.apply_update(profile, request)
        await db.commit()
        logger.info("Updated profile %s", profile_id)

        return mapper.profile_to_response(await ProfileService._load(db, profile_id))

    @staticmethod
    async def delete_profile(db: AsyncSession, profile_id: int) -> None:
        """物理删除档案，子记录一并删除"""
        profile = await ProfileService._load(db, profile_id)
        await db.delete(profile)
        await db.commit()
        logger.info("Deleted profile %s", profile_id)

    @staticmethod
    async def deactivate_profile(db: AsyncSession, profile_id: int) -> None:
        profile = await crud_profile.get_profile(db, profile_id)
        if profile is None:
            raise NotFoundError(f"Profile not found with id: {profile_id}")
        profile.active = False
        await db.commit()
        logger.info("Deactivated profile %s", profile_id)
