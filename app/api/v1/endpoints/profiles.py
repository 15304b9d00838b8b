"""
简历档案相关API路由
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.deps import get_db
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter()


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    profile_create: ProfileCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    创建简历档案
    """
    return await ProfileService.create_profile(db, profile_create)


@router.get("/active", response_model=List[ProfileResponse])
async def get_active_profiles(db: AsyncSession = Depends(get_db)):
    """
    获取所有启用的档案
    """
    return await ProfileService.get_active_profiles(db)


@router.get("/email/{email}", response_model=ProfileResponse)
async def get_profile_by_email(email: str, db: AsyncSession = Depends(get_db)):
    return await ProfileService.get_profile_by_email(db, email)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    return await ProfileService.get_profile_by_id(db, profile_id)


@router.get("/{profile_id}/full", response_model=ProfileResponse)
async def get_full_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    """
    获取档案及其工作经历、教育经历、技能和证书
    """
    return await ProfileService.get_profile_with_all_relations(db, profile_id)


@router.put("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: int,
    profile_update: ProfileUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    更新档案，只修改提供的字段
    """
    return await ProfileService.update_profile(db, profile_id, profile_update)


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    """
    删除档案及其全部子记录
    """
    await ProfileService.delete_profile(db, profile_id)


@router.patch("/{profile_id}/deactivate", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    await ProfileService.deactivate_profile(db, profile_id)
