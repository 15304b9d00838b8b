import enum
from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.mixins import TimestampMixin


class SkillCategory(str, enum.Enum):
    """技能类别"""
    PROGRAMMING_LANGUAGE = "PROGRAMMING_LANGUAGE"
    FRAMEWORK = "FRAMEWORK"
    DATABASE = "DATABASE"
    TOOL = "TOOL"
    METHODOLOGY = "METHODOLOGY"
    SOFT_SKILL = "SOFT_SKILL"
    OTHER = "OTHER"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class ProficiencyLevel(str, enum.Enum):
    """熟练程度"""
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"

    @property
    def display_name(self) -> str:
        return self.value.title()


class Skill(TimestampMixin, Base):
    """技能模型"""
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name = Column(String(100), nullable=False)
    category = Column(Enum(SkillCategory), nullable=False)
    proficiency_level = Column(Enum(ProficiencyLevel), nullable=True)
    years_of_experience = Column(Integer, nullable=True, comment="0-50")
    display_order = Column(Integer, nullable=True)
    primary = Column("is_primary", Boolean, nullable=False, default=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    profile = relationship("Profile", back_populates="skills")

    def __repr__(self):
        return f"<Skill(id={self.id}, name={self.name})>"
