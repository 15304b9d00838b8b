from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.mixins import TimestampMixin


class Profile(TimestampMixin, Base):
    """简历档案模型，四个子集合的聚合根"""
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False, comment="First name")
    last_name = Column(String(100), nullable=False, comment="Last name")
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Contact email, unique across profiles"
    )
    phone = Column(String(20), nullable=True)
    location = Column(String(255), nullable=True)
    linked_in_url = Column("linkedin_url", String(255), nullable=True)
    github_url = Column(String(255), nullable=True)
    website_url = Column(String(255), nullable=True)
    title = Column(String(255), nullable=False, comment="Professional title")
    summary = Column(Text, nullable=True)
    active = Column(
        Boolean,
        nullable=False,
        default=True,
        comment="Soft-delete marker"
    )
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # 子集合不做懒加载，调用方通过selectinload显式加载
    experiences = relationship(
        "Experience",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="desc(Experience.start_date)",
    )
    educations = relationship(
        "Education",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Education.graduation_date.desc().nulls_first()",
    )
    skills = relationship(
        "Skill",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Skill.display_order",
    )
    certifications = relationship(
        "Certification",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="desc(Certification.date_obtained)",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Profile(id={self.id}, email={self.email})>"
