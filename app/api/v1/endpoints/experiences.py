"""
工作经历相关API路由
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.deps import get_db
from app.schemas.common import ReorderRequest
from app.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate
from app.services.experience_service import ExperienceService

router = APIRouter()


@router.post("", response_model=ExperienceResponse, status_code=status.HTTP_201_CREATED)
async def create_experience(
    profile_id: int,
    experience_create: ExperienceCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    添加工作经历
    """
    return await ExperienceService.create(db, profile_id, experience_create)


@router.get("", response_model=List[ExperienceResponse])
async def get_experiences(profile_id: int, db: AsyncSession = Depends(get_db)):
    """
    获取工作经历列表，最近的排在前面
    """
    return await ExperienceService.list(db, profile_id)


@router.get("/current", response_model=List[ExperienceResponse])
async def get_current_experiences(profile_id: int, db: AsyncSession = Depends(get_db)):
    return await ExperienceService.get_current_experiences(db, profile_id)


@router.put("/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_experiences(
    profile_id: int,
    reorder: ReorderRequest,
    db: AsyncSession = Depends(get_db)
):
    await ExperienceService.reorder(db, profile_id, reorder.ordered_ids)


@router.get("/{experience_id}", response_model=ExperienceResponse)
async def get_experience(
    profile_id: int,
    experience_id: int,
    db: AsyncSession = Depends(get_db)
):
    return await ExperienceService.get(db, profile_id, experience_id)


@router.put("/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    profile_id: int,
    experience_id: int,
    experience_update: ExperienceUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await ExperienceService.update(db, profile_id, experience_id, experience_update)


@router.delete("/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_experience(
    profile_id: int,
    experience_id: int,
    db: AsyncSession = Depends(get_db)
):
    await ExperienceService.delete(db, profile_id, experience_id)
