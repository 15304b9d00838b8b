"""
档案子集合的通用服务逻辑
"""

import logging
from typing import Any, Callable, ClassVar, List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError, ValidationFailedError
from app.crud.base import CRUDProfileChild
from app.services import mapper
from app.services.profile_service import ProfileService, check_version

logger = logging.getLogger(__name__)


class ProfileChildService:
    """
    单类子实体的增删改查与排序。

    子类设置crud对象、消息中使用的实体名以及转换函数。
    """

    crud: ClassVar[CRUDProfileChild]
    entity_name: ClassVar[str]
    from_create: ClassVar[Callable[..., Any]]
    to_response: ClassVar[Callable[..., Any]]

    @classmethod
    def _respond(cls, entity):
        return cls.to_response(entity)

    @classmethod
    def _respond_all(cls, entities) -> List[Any]:
        return [cls._respond(e) for e in entities]

    @classmethod
    def _not_found(cls, child_id: int, profile_id: int) -> NotFoundError:
        return NotFoundError(f"{cls.entity_name} not found with id: {child_id} for profile: {profile_id}")

    @classmethod
    async def _get_entity(cls, db: AsyncSession, profile_id: int, child_id: int):
        entity = await cls.crud.get_by_id_and_profile(db, child_id, profile_id)
        if entity is None:
            raise cls._not_found(child_id, profile_id)
        return entity

    @classmethod
    async def _before_create(cls, db: AsyncSession, profile_id: int, request) -> None:
        pass

    @classmethod
    async def create(cls, db: AsyncSession, profile_id: int, request):
        logger.debug("Creating %s for profile %s", cls.entity_name, profile_id)
        await ProfileService.ensure_exists(db, profile_id)
        await cls._before_create(db, profile_id, request)

        entity = cls.from_create(request, profile_id)
        if entity.display_order is None:
            entity.display_order = await cls.crud.max_display_order(db, profile_id) + 1

        db.add(entity)
        await db.commit()
        logger.info("Created %s %s for profile %s", cls.entity_name, entity.id, profile_id)
        return cls._respond(entity)

    @classmethod
    async def list(cls, db: AsyncSession, profile_id: int) -> List[Any]:
        await ProfileService.ensure_exists(db, profile_id)
        return cls._respond_all(await cls.crud.list_by_profile(db, profile_id))

    @classmethod
    async def get(cls, db: AsyncSession, profile_id: int, child_id: int):
        return cls._respond(await cls._get_entity(db, profile_id, child_id))

    @classmethod
    async def update(cls, db: AsyncSession, profile_id: int, child_id: int, request):
        """部分更新，合并后的实体仍需满足日期规则"""
        logger.debug("Updating %s %s for profile %s", cls.entity_name, child_id, profile_id)
        entity = await cls._get_entity(db, profile_id, child_id)
        check_version(entity, request.version)

        mapper.apply_update(entity, request)
        errors = entity.date_errors() if hasattr(entity, "date_errors") else {}
        if errors:
            # 尚未flush，丢弃内存中的修改
            await db.rollback()
            raise ValidationFailedError(f"Invalid {cls.entity_name.lower()} data", errors)

        await db.commit()
        logger.info("Updated %s %s", cls.entity_name, child_id)
        return cls._respond(entity)

    @classmethod
    async def delete(cls, db: AsyncSession, profile_id: int, child_id: int) -> None:
        entity = await cls._get_entity(db, profile_id, child_id)
        await db.delete(entity)
        await db.commit()
        logger.info("Deleted %s %s from profile %s", cls.entity_name, child_id, profile_id)

    @classmethod
    async def reorder(cls, db: AsyncSession, profile_id: int, ordered_ids: Sequence[int]) -> None:
        """按ordered_ids重新排序（从1开始），全部成功或全部不变"""
        logger.debug("Reordering %s for profile %s: %s", cls.entity_name, profile_id, ordered_ids)
        await ProfileService.ensure_exists(db, profile_id)

        if len(set(ordered_ids)) != len(ordered_ids):
            raise ValidationFailedError(
                "Ordered ids must not contain duplicates",
                {"orderedIds": "Duplicate ids are not allowed"},
            )

        entities = await cls.crud.find_by_ids_for_profile(db, ordered_ids, profile_id)
        by_id = {entity.id: entity for entity in entities}
        for child_id in ordered_ids:
            if child_id not in by_id:
                raise cls._not_found(child_id, profile_id)

        for position, child_id in enumerate(ordered_ids, start=1):
            by_id[child_id].display_order = position

        await db.commit()
        logger.info("Reordered %d %s rows for profile %s", len(ordered_ids), cls.entity_name, profile_id)
