"""
证书相关API路由
"""

from typing import List
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.deps import get_db
from app.schemas.certification import (
    CertificationCreate,
    CertificationResponse,
    CertificationUpdate,
)
from app.services.certification_service import CertificationService

router = APIRouter()


@router.post("", response_model=CertificationResponse, status_code=status.HTTP_201_CREATED)
async def create_certification(
    profile_id: int,
    certification_create: CertificationCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    添加证书，同一机构的同名证书会被拒绝
    """
    return await CertificationService.create(db, profile_id, certification_create)


@router.get("", response_model=List[CertificationResponse])
async def get_certifications(profile_id: int, db: AsyncSession = Depends(get_db)):
    return await CertificationService.list(db, profile_id)


@router.get("/expired", response_model=List[CertificationResponse])
async def get_expired_certifications(profile_id: int, db: AsyncSession = Depends(get_db)):
    return await CertificationService.get_expired(db, profile_id)


@router.get("/expiring-soon", response_model=List[CertificationResponse])
async def get_expiring_certifications(profile_id: int, db: AsyncSession = Depends(get_db)):
    """
    获取三个月内到期的证书
    """
    return await CertificationService.get_expiring_soon(db, profile_id)


@router.get("/organization/{organization}", response_model=List[CertificationResponse])
async def get_certifications_by_organization(
    profile_id: int,
    organization: str,
    db: AsyncSession = Depends(get_db)
):
    return await CertificationService.get_by_organization(db, profile_id, organization)


@router.put("/order", status_code=status.HTTP_204_NO_CONTENT)
async def update_certification_order(
    profile_id: int,
    certification_ids: List[int] = Body(...),
    db: AsyncSession = Depends(get_db)
):
    """
    证书排序，请求体为ID列表
    """
    await CertificationService.reorder(db, profile_id, certification_ids)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_certifications(profile_id: int, db: AsyncSession = Depends(get_db)):
    await CertificationService.delete_all(db, profile_id)


@router.get("/{certification_id}", response_model=CertificationResponse)
async def get_certification(
    profile_id: int,
    certification_id: int,
    db: AsyncSession = Depends(get_db)
):
    return await CertificationService.get(db, profile_id, certification_id)


@router.put("/{certification_id}", response_model=CertificationResponse)
async def update_certification(
    profile_id: int,
    certification_id: int,
    certification_update: CertificationUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await CertificationService.update(db, profile_id, certification_id, certification_update)


@router.delete("/{certification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_certification(
    profile_id: int,
    certification_id: int,
    db: AsyncSession = Depends(get_db)
):
    await CertificationService.delete(db, profile_id, certification_id)
