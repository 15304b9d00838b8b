from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator
from app.schemas.base import CamelModel


class CertificationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    issuing_organization: str = Field(..., min_length=1, max_length=255)
    credential_id: Optional[str] = Field(None, max_length=100)
    credential_url: Optional[str] = Field(None, max_length=500)
    date_obtained: date
    expiration_date: Optional[date] = None
    does_not_expire: bool = False
    description: Optional[str] = Field(None, max_length=1000)
    display_order: Optional[int] = None

    @field_validator("date_obtained")
    @classmethod
    def obtained_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Date obtained cannot be in the future")
        return v

    @model_validator(mode="after")
    def expiration_after_obtained(self) -> "CertificationCreate":
        if (
            not self.does_not_expire
            and self.expiration_date is not None
            and self.expiration_date <= self.date_obtained
        ):
            raise ValueError("Expiration date must be after date obtained")
        return self


class CertificationUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    issuing_organization: Optional[str] = Field(None, min_length=1, max_length=255)
    credential_id: Optional[str] = Field(None, max_length=100)
    credential_url: Optional[str] = Field(None, max_length=500)
    date_obtained: Optional[date] = None
    expiration_date: Optional[date] = None
    does_not_expire: Optional[bool] = None
    description: Optional[str] = Field(None, max_length=1000)
    display_order: Optional[int] = None
    version: Optional[int] = None


class CertificationResponse(CamelModel):
    id: int
    profile_id: int
    name: str
    issuing_organization: str
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None
    date_obtained: date
    expiration_date: Optional[date] = None
    does_not_expire: bool
    description: Optional[str] = None
    display_order: Optional[int] = None
    expired: bool
    expiring_soon: bool
    created_at: datetime
    updated_at: datetime
    version: int
