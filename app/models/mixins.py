from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, event


class TimestampMixin:
    """由下方保存钩子维护的创建/更新时间"""

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Creation time"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Last update time"
    )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def stamp_created(mapper, connection, target):
    if target.created_at is None:
        target.created_at = utc_now()
    if target.updated_at is None:
        target.updated_at = target.created_at


@event.listens_for(TimestampMixin, "before_update", propagate=True)
def stamp_updated(mapper, connection, target):
    target.updated_at = utc_now()
