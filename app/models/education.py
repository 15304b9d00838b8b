from datetime import date
from typing import Dict
from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.mixins import TimestampMixin


class Education(TimestampMixin, Base):
    """教育经历模型"""
    __tablename__ = "educations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    institution_name = Column(String(255), nullable=False)
    degree = Column(String(255), nullable=False)
    field_of_study = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=True)
    graduation_date = Column(Date, nullable=True, comment="Null while ongoing")
    grade = Column(String(10), nullable=True)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=True)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    profile = relationship("Profile", back_populates="educations")

    def date_errors(self) -> Dict[str, str]:
        errors = {}
        if self.start_date is not None and self.start_date > date.today():
            errors["startDate"] = "Start date cannot be in the future"
        if (
            self.graduation_date is not None
            and self.start_date is not None
            and self.graduation_date < self.start_date
        ):
            errors["graduationDate"] = "Graduation date must be on or after start date"
        return errors

    def __repr__(self):
        return f"<Education(id={self.id}, institution_name={self.institution_name})>"
