from datetime import date, datetime
from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from app.schemas.base import CamelModel


class ExperienceCreate(CamelModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    job_title: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    start_date: date
    end_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = Field(None, max_length=2000)
    achievements: List[str] = []
    technologies: List[str] = []
    display_order: Optional[int] = None

    @field_validator("start_date")
    @classmethod
    def start_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Start date cannot be in the future")
        return v

    @model_validator(mode="after")
    def end_after_start(self) -> "ExperienceCreate":
        if self.current:
            self.end_date = None
        elif self.end_date is not None and self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self


class ExperienceUpdate(CamelModel):
    """部分更新，合并后重新校验日期顺序"""
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    job_title: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: Optional[bool] = None
    description: Optional[str] = Field(None, max_length=2000)
    achievements: Optional[List[str]] = None
    technologies: Optional[List[str]] = None
    display_order: Optional[int] = None
    version: Optional[int] = None


class ExperienceResponse(CamelModel):
    id: int
    profile_id: int
    company_name: str
    job_title: str
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    current: bool
    description: Optional[str] = None
    achievements: List[str] = []
    technologies: List[str] = []
    display_order: Optional[int] = None
    duration: str
    formatted_date_range: str
    created_at: datetime
    updated_at: datetime
    version: int
