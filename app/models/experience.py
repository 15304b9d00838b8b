from datetime import date, timedelta
from typing import Dict, Optional
from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text, event
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates
from app.db.base import Base
from app.models.mixins import TimestampMixin
from app.utils.dates import format_duration, format_month_year, period_between


class ExperienceAchievement(Base):
    """工作经历的成就条目（有序）"""
    __tablename__ = "experience_achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    experience_id = Column(
        Integer,
        ForeignKey("experiences.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    position = Column(Integer, nullable=False, comment="Position within the list")
    achievement = Column(Text, nullable=False)


class ExperienceTechnology(Base):
    """工作经历的技术栈条目（有序）"""
    __tablename__ = "experience_technologies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    experience_id = Column(
        Integer,
        ForeignKey("experiences.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    position = Column(Integer, nullable=False, comment="Position within the list")
    technology = Column(String(255), nullable=False)


class Experience(TimestampMixin, Base):
    """工作经历模型"""
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    company_name = Column(String(255), nullable=False)
    job_title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    current = Column("is_current", Boolean, nullable=False, default=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=True)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    profile = relationship("Profile", back_populates="experiences")

    achievement_items = relationship(
        "ExperienceAchievement",
        order_by="ExperienceAchievement.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    technology_items = relationship(
        "ExperienceTechnology",
        order_by="ExperienceTechnology.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    achievements = association_proxy(
        "achievement_items",
        "achievement",
        creator=lambda value: ExperienceAchievement(achievement=value),
    )
    technologies = association_proxy(
        "technology_items",
        "technology",
        creator=lambda value: ExperienceTechnology(technology=value),
    )

    @validates("current")
    def _clear_end_date_when_current(self, key, value):
        if value:
            self.end_date = None
        return value

    def date_errors(self) -> Dict[str, str]:
        """返回违反日期规则的字段及错误信息"""
        errors = {}
        if self.start_date is None:
            errors["startDate"] = "Start date is required"
        elif self.start_date > date.today():
            errors["startDate"] = "Start date cannot be in the future"
        if self.end_date is not None and self.start_date is not None and self.end_date <= self.start_date:
            errors["endDate"] = "End date must be after start date"
        return errors

    def duration(self, today: Optional[date] = None) -> str:
        """计算工作时长（年和月），包含结束日，不足一月按一月计"""
        end = (today or date.today()) if self.current else self.end_date
        if self.start_date is None or end is None:
            return ""

        years, months, days = period_between(self.start_date, end + timedelta(days=1))
        if days > 0:
            months += 1
            if months >= 12:
                years += 1
                months -= 12
        return format_duration(years, months)

    def formatted_date_range(self) -> str:
        if self.start_date is None:
            return ""
        start = format_month_year(self.start_date)
        if self.current:
            end = "Present"
        else:
            end = format_month_year(self.end_date) if self.end_date else ""
        return f"{start} - {end}"

    def __repr__(self):
        return f"<Experience(id={self.id}, company_name={self.company_name})>"


@event.listens_for(Experience, "before_insert")
@event.listens_for(Experience, "before_update")
def clear_end_date_for_current(mapper, connection, target):
    if target.current and target.end_date is not None:
        target.end_date = None
