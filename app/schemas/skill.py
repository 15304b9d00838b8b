from datetime import datetime
from typing import Optional
from pydantic import Field
from app.models.skill import ProficiencyLevel, SkillCategory
from app.schemas.base import CamelModel


class SkillCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    category: SkillCategory
    proficiency_level: Optional[ProficiencyLevel] = None
    years_of_experience: Optional[int] = Field(None, ge=0, le=50)
    display_order: Optional[int] = None
    primary: bool = False


class SkillUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[SkillCategory] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    years_of_experience: Optional[int] = Field(None, ge=0, le=50)
    display_order: Optional[int] = None
    primary: Optional[bool] = None
    version: Optional[int] = None


class SkillResponse(CamelModel):
    id: int
    profile_id: int
    name: str
    category: SkillCategory
    category_display_name: str
    proficiency_level: Optional[ProficiencyLevel] = None
    proficiency_display_name: Optional[str] = None
    years_of_experience: Optional[int] = None
    display_order: Optional[int] = None
    primary: bool
    created_at: datetime
    updated_at: datetime
    version: int
