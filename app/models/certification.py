from datetime import date
from typing import Dict, Optional
from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text, event
from sqlalchemy.orm import relationship, validates
from app.db.base import Base
from app.models.mixins import TimestampMixin
from app.utils.dates import add_months

# 在此月数内到期的证书视为"即将到期"
EXPIRING_SOON_MONTHS = 3


class Certification(TimestampMixin, Base):
    """证书模型"""
    __tablename__ = "certifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name = Column(String(255), nullable=False)
    issuing_organization = Column(String(255), nullable=False)
    credential_id = Column(String(100), nullable=True)
    credential_url = Column(String(500), nullable=True)
    date_obtained = Column(Date, nullable=False)
    expiration_date = Column(Date, nullable=True)
    does_not_expire = Column(Boolean, nullable=False, default=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=True)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    profile = relationship("Profile", back_populates="certifications")

    @validates("does_not_expire")
    def _clear_expiration_when_permanent(self, key, value):
        if value:
            self.expiration_date = None
        return value

    def is_expired(self, today: Optional[date] = None) -> bool:
        if self.does_not_expire or self.expiration_date is None:
            return False
        return (today or date.today()) > self.expiration_date

    def is_expiring_soon(self, today: Optional[date] = None) -> bool:
        if self.does_not_expire or self.expiration_date is None:
            return False
        today = today or date.today()
        return add_months(today, EXPIRING_SOON_MONTHS) > self.expiration_date and not self.is_expired(today)

    def date_errors(self) -> Dict[str, str]:
        errors = {}
        if self.date_obtained is None:
            errors["dateObtained"] = "Date obtained is required"
        elif self.date_obtained > date.today():
            errors["dateObtained"] = "Date obtained cannot be in the future"
        if (
            not self.does_not_expire
            and self.expiration_date is not None
            and self.date_obtained is not None
            and self.expiration_date <= self.date_obtained
        ):
            errors["expirationDate"] = "Expiration date must be after date obtained"
        return errors

    def __repr__(self):
        return f"<Certification(id={self.id}, name={self.name})>"


@event.listens_for(Certification, "before_insert")
@event.listens_for(Certification, "before_update")
def clear_expiration_for_permanent(mapper, connection, target):
    if target.does_not_expire and target.expiration_date is not None:
        target.expiration_date = None
