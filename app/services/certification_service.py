import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import DuplicateResourceError
from app.crud.crud_certification import certification as crud_certification
from app.schemas.certification import CertificationCreate, CertificationResponse
from app.services import mapper
from app.services.profile_child_service import ProfileChildService
from app.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class CertificationService(ProfileChildService):
    """证书服务类，包含过期相关查询"""

    crud = crud_certification
    entity_name = "Certification"
    from_create = staticmethod(mapper.certification_from_create)
    to_response = staticmethod(mapper.certification_to_response)

    @classmethod
    def _respond_all(cls, entities) -> List[CertificationResponse]:
        return mapper.certifications_to_response(entities)

    @classmethod
    async def _before_create(cls, db: AsyncSession, profile_id: int, request: CertificationCreate) -> None:
        if await crud_certification.exists_by_name_and_organization(
            db, profile_id, request.name, request.issuing_organization
        ):
            raise DuplicateResourceError(
                f"Certification '{request.name}' from {request.issuing_organization} "
                f"already exists for this profile"
            )

    @classmethod
    async def get_expired(cls, db: AsyncSession, profile_id: int) -> List[CertificationResponse]:
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await crud_certification.list_expired(db, profile_id))

    @classmethod
    async def get_expiring_soon(cls, db: AsyncSession, profile_id: int) -> List[CertificationResponse]:
        """当前有效但三个月内到期的证书"""
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await crud_certification.list_expiring_soon(db, profile_id))

    @classmethod
    async def get_by_organization(
        cls, db: AsyncSession, profile_id: int, organization: str
    ) -> List[CertificationResponse]:
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(
            await crud_certification.list_by_organization(db, profile_id, organization)
        )

    @classmethod
    async def delete_all(cls, db: AsyncSession, profile_id: int) -> int:
        await ProfileService.ensure_exists(db, profile_id)
        deleted = await crud_certification.delete_by_profile(db, profile_id)
        await db.commit()
        logger.info("Deleted %d certifications from profile %s", deleted, profile_id)
        return deleted
