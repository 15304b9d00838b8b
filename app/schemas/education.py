from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator
from app.schemas.base import CamelModel


class EducationCreate(CamelModel):
    institution_name: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    field_of_study: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    graduation_date: Optional[date] = None
    grade: Optional[str] = Field(None, max_length=10)
    description: Optional[str] = Field(None, max_length=2000)
    display_order: Optional[int] = None

    @field_validator("start_date")
    @classmethod
    def start_not_in_future(cls, v: Optional[date]) -> Optional[date]:
        if v is not None and v > date.today():
            raise ValueError("Start date cannot be in the future")
        return v

    @model_validator(mode="after")
    def graduation_after_start(self) -> "EducationCreate":
        if self.start_date and self.graduation_date and self.graduation_date < self.start_date:
            raise ValueError("Graduation date must be on or after start date")
        return self


class EducationUpdate(CamelModel):
    institution_name: Optional[str] = Field(None, min_length=1, max_length=255)
    degree: Optional[str] = Field(None, min_length=1, max_length=255)
    field_of_study: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    graduation_date: Optional[date] = None
    grade: Optional[str] = Field(None, max_length=10)
    description: Optional[str] = Field(None, max_length=2000)
    display_order: Optional[int] = None
    version: Optional[int] = None


class EducationResponse(CamelModel):
    id: int
    profile_id: int
    institution_name: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: Optional[date] = None
    graduation_date: Optional[date] = None
    grade: Optional[str] = None
    description: Optional[str] = None
    display_order: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    version: int
