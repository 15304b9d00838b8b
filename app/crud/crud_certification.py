from datetime import date
from typing import List, Optional
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.crud.base import CRUDProfileChild
from app.models.certification import EXPIRING_SOON_MONTHS, Certification
from app.utils.dates import add_months


class CRUDCertification(CRUDProfileChild[Certification]):

    def default_order(self):
        return (
            Certification.display_order,
            Certification.date_obtained.desc(),
            Certification.id,
        )

    def _expiring(self, profile_id: int):
        return select(Certification).where(
            Certification.profile_id == profile_id,
            or_(Certification.does_not_expire.is_(False), Certification.does_not_expire.is_(None)),
            Certification.expiration_date.is_not(None)
        )

    async def list_expired(
        self, db: AsyncSession, profile_id: int, today: Optional[date] = None
    ) -> List[Certification]:
        today = today or date.today()
        stmt = self._expiring(profile_id).where(
            Certification.expiration_date < today
        ).order_by(Certification.expiration_date)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def list_expiring_soon(
        self, db: AsyncSession, profile_id: int, today: Optional[date] = None
    ) -> List[Certification]:
        today = today or date.today()
        stmt = self._expiring(profile_id).where(
            Certification.expiration_date >= today,
            Certification.expiration_date < add_months(today, EXPIRING_SOON_MONTHS)
        ).order_by(Certification.expiration_date)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def list_by_organization(
        self, db: AsyncSession, profile_id: int, organization: str
    ) -> List[Certification]:
        stmt = select(Certification).where(
            Certification.profile_id == profile_id,
            Certification.issuing_organization == organization
        ).order_by(*self.default_order())
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_name_and_organization(
        self, db: AsyncSession, profile_id: int, name: str, organization: str
    ) -> bool:
        stmt = select(Certification.id).where(
            Certification.profile_id == profile_id,
            Certification.name == name,
            Certification.issuing_organization == organization
        )
        result = await db.execute(stmt)
        return result.first() is not None


certification = CRUDCertification(Certification)
