from fastapi import APIRouter
from app.api.v1.endpoints import auth, certifications, educations, experiences, profiles, skills

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["Profiles"])
api_router.include_router(
    experiences.router, prefix="/profiles/{profile_id}/experiences", tags=["Experiences"]
)
api_router.include_router(
    educations.router, prefix="/profiles/{profile_id}/educations", tags=["Educations"]
)
api_router.include_router(skills.router, prefix="/profiles/{profile_id}/skills", tags=["Skills"])
api_router.include_router(
    certifications.router, prefix="/profiles/{profile_id}/certifications", tags=["Certifications"]
)
