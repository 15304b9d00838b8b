"""
简历档案数据模型
"""

from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field
from app.schemas.base import CamelModel
from app.schemas.certification import CertificationResponse
from app.schemas.education import EducationResponse
from app.schemas.experience import ExperienceResponse
from app.schemas.skill import SkillResponse


class ProfileCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=255)
    linked_in_url: Optional[str] = Field(None, max_length=255)
    github_url: Optional[str] = Field(None, max_length=255)
    website_url: Optional[str] = Field(None, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    summary: Optional[str] = Field(None, max_length=2000)


class ProfileUpdate(CamelModel):
    """部分更新，为空的字段保持原值"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=255)
    linked_in_url: Optional[str] = Field(None, max_length=255)
    github_url: Optional[str] = Field(None, max_length=255)
    website_url: Optional[str] = Field(None, max_length=255)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    summary: Optional[str] = Field(None, max_length=2000)
    version: Optional[int] = None


class ProfileResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    linked_in_url: Optional[str] = None
    github_url: Optional[str] = None
    website_url: Optional[str] = None
    title: str
    summary: Optional[str] = None
    active: bool
    experiences: List[ExperienceResponse] = []
    educations: List[EducationResponse] = []
    skills: List[SkillResponse] = []
    certifications: List[CertificationResponse] = []
    created_at: datetime
    updated_at: datetime
    version: int
