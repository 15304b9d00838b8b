"""
教育经历相关API路由
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.deps import get_db
from app.schemas.common import ReorderRequest
from app.schemas.education import EducationCreate, EducationResponse, EducationUpdate
from app.services.education_service import EducationService

router = APIRouter()


@router.post("", response_model=EducationResponse, status_code=status.HTTP_201_CREATED)
async def create_education(
    profile_id: int,
    education_create: EducationCreate,
    db: AsyncSession = Depends(get_db)
):
    return await EducationService.create(db, profile_id, education_create)


@router.get("", response_model=List[EducationResponse])
async def get_educations(profile_id: int, db: AsyncSession = Depends(get_db)):
    """
    获取教育经历，在读的在前，其余按毕业日期排序
    """
    return await EducationService.list(db, profile_id)


@router.put("/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_educations(
    profile_id: int,
    reorder: ReorderRequest,
    db: AsyncSession = Depends(get_db)
):
    await EducationService.reorder(db, profile_id, reorder.ordered_ids)


@router.get("/{education_id}", response_model=EducationResponse)
async def get_education(
    profile_id: int,
    education_id: int,
    db: AsyncSession = Depends(get_db)
):
    return await EducationService.get(db, profile_id, education_id)


@router.put("/{education_id}", response_model=EducationResponse)
async def update_education(
    profile_id: int,
    education_id: int,
    education_update: EducationUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await EducationService.update(db, profile_id, education_id, education_update)


@router.delete("/{education_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_education(
    profile_id: int,
    education_id: int,
    db: AsyncSession = Depends(get_db)
):
    await EducationService.delete(db, profile_id, education_id)
