"""
数据模型包
导入所有SQLAlchemy模型，确保Base.metadata包含全部数据表
"""

from app.db.base import Base
from app.models.user import User, Role
from app.models.profile import Profile
from app.models.experience import Experience, ExperienceAchievement, ExperienceTechnology
from app.models.education import Education
from app.models.skill import Skill, SkillCategory, ProficiencyLevel
from app.models.certification import Certification

__all__ = [
    "Base",
    "User",
    "Role",
    "Profile",
    "Experience",
    "ExperienceAchievement",
    "ExperienceTechnology",
    "Education",
    "Skill",
    "SkillCategory",
    "ProficiencyLevel",
    "Certification",
]
