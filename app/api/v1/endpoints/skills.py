"""
技能相关API路由
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.deps import get_db
from app.models.skill import SkillCategory
from app.schemas.common import ReorderRequest
from app.schemas.skill import SkillCreate, SkillResponse, SkillUpdate
from app.services.skill_service import SkillService

router = APIRouter()


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    profile_id: int,
    skill_create: SkillCreate,
    db: AsyncSession = Depends(get_db)
):
    return await SkillService.create(db, profile_id, skill_create)


@router.get("", response_model=List[SkillResponse])
async def get_skills(
    profile_id: int,
    category: Optional[SkillCategory] = Query(None, description="Only skills of this category"),
    db: AsyncSession = Depends(get_db)
):
    return await SkillService.list_skills(db, profile_id, category)


@router.get("/primary", response_model=List[SkillResponse])
async def get_primary_skills(profile_id: int, db: AsyncSession = Depends(get_db)):
    return await SkillService.get_primary_skills(db, profile_id)


@router.put("/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_skills(
    profile_id: int,
    reorder: ReorderRequest,
    db: AsyncSession = Depends(get_db)
):
    await SkillService.reorder(db, profile_id, reorder.ordered_ids)


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(profile_id: int, skill_id: int, db: AsyncSession = Depends(get_db)):
    return await SkillService.get(db, profile_id, skill_id)


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    profile_id: int,
    skill_id: int,
    skill_update: SkillUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await SkillService.update(db, profile_id, skill_id, skill_update)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(profile_id: int, skill_id: int, db: AsyncSession = Depends(get_db)):
    await SkillService.delete(db, profile_id, skill_id)
