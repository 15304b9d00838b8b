"""
实体与请求/响应模型之间的转换

派生字段（全名、工作时长与日期范围、证书到期标记、技能显示名）在这里计算，不落库。
"""

from datetime import date
from typing import Any, Dict, Iterable, Optional
from app.models.certification import Certification
from app.models.education import Education
from app.models.experience import Experience, ExperienceAchievement, ExperienceTechnology
from app.models.profile import Profile
from app.models.skill import Skill
from app.schemas.certification import CertificationCreate, CertificationResponse
from app.schemas.education import EducationCreate, EducationResponse
from app.schemas.experience import ExperienceCreate, ExperienceResponse
from app.schemas.profile import ProfileCreate, ProfileResponse
from app.schemas.skill import SkillCreate, SkillResponse

# 不直接对应数据库列的请求字段
NON_COLUMN_FIELDS = {"version"}


def update_values(update: Any) -> Dict[str, Any]:
    """调用方实际提供且非空的字段"""
    return {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None and key not in NON_COLUMN_FIELDS
    }


def apply_update(entity: Any, update: Any) -> Dict[str, Any]:
    values = update_values(update)
    for field, value in values.items():
        setattr(entity, field, value)
    return values


def profile_from_create(data: ProfileCreate) -> Profile:
    return Profile(**data.model_dump(), active=True)


def profile_to_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        full_name=profile.full_name,
        email=profile.email,
        phone=profile.phone,
        location=profile.location,
        linked_in_url=profile.linked_in_url,
        github_url=profile.github_url,
        website_url=profile.website_url,
        title=profile.title,
        summary=profile.summary,
        active=profile.active,
        experiences=experiences_to_response(profile.experiences),
        educations=[education_to_response(e) for e in profile.educations],
        skills=[skill_to_response(s) for s in profile.skills],
        certifications=certifications_to_response(profile.certifications),
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        version=profile.version,
    )


def experience_from_create(data: ExperienceCreate, profile_id: int) -> Experience:
    values = data.model_dump(exclude={"achievements", "technologies"})
    # 列表即使为空也要赋值，提交后不会再触发懒加载
    return Experience(
        profile_id=profile_id,
        achievement_items=[
            ExperienceAchievement(position=i, achievement=a) for i, a in enumerate(data.achievements)
        ],
        technology_items=[
            ExperienceTechnology(position=i, technology=t) for i, t in enumerate(data.technologies)
        ],
        **values
    )


def experience_to_response(experience: Experience, today: Optional[date] = None) -> ExperienceResponse:
    return ExperienceResponse(
        id=experience.id,
        profile_id=experience.profile_id,
        company_name=experience.company_name,
        job_title=experience.job_title,
        location=experience.location,
        start_date=experience.start_date,
        end_date=experience.end_date,
        current=bool(experience.current),
        description=experience.description,
        achievements=list(experience.achievements),
        technologies=list(experience.technologies),
        display_order=experience.display_order,
        duration=experience.duration(today),
        formatted_date_range=experience.formatted_date_range(),
        created_at=experience.created_at,
        updated_at=experience.updated_at,
        version=experience.version,
    )


def experiences_to_response(experiences: Iterable[Experience]):
    today = date.today()
    return [experience_to_response(e, today) for e in experiences]


def education_from_create(data: EducationCreate, profile_id: int) -> Education:
    return Education(profile_id=profile_id, **data.model_dump())


def education_to_response(education: Education) -> EducationResponse:
    return EducationResponse.model_validate(education)


def skill_from_create(data: SkillCreate, profile_id: int) -> Skill:
    return Skill(profile_id=profile_id, **data.model_dump())


def skill_to_response(skill: Skill) -> SkillResponse:
    proficiency = skill.proficiency_level
    return SkillResponse(
        id=skill.id,
        profile_id=skill.profile_id,
        name=skill.name,
        category=skill.category,
        category_display_name=skill.category.display_name,
        proficiency_level=proficiency,
        proficiency_display_name=proficiency.display_name if proficiency else None,
        years_of_experience=skill.years_of_experience,
        display_order=skill.display_order,
        primary=bool(skill.primary),
        created_at=skill.created_at,
        updated_at=skill.updated_at,
        version=skill.version,
    )


def certification_from_create(data: CertificationCreate, profile_id: int) -> Certification:
    return Certification(profile_id=profile_id, **data.model_dump())


def certification_to_response(
    certification: Certification, today: Optional[date] = None
) -> CertificationResponse:
    today = today or date.today()
    return CertificationResponse(
        id=certification.id,
        profile_id=certification.profile_id,
        name=certification.name,
        issuing_organization=certification.issuing_organization,
        credential_id=certification.credential_id,
        credential_url=certification.credential_url,
        date_obtained=certification.date_obtained,
        expiration_date=certification.expiration_date,
        does_not_expire=bool(certification.does_not_expire),
        description=certification.description,
        display_order=certification.display_order,
        expired=certification.is_expired(today),
        expiring_soon=certification.is_expiring_soon(today),
        created_at=certification.created_at,
        updated_at=certification.updated_at,
        version=certification.version,
    )


def certifications_to_response(certifications: Iterable[Certification]):
    today = date.today()
    return [certification_to_response(c, today) for c in certifications]
