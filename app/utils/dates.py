"""
简历派生字段使用的日期工具
"""

import calendar
from datetime import date
from typing import Tuple


def add_months(value: date, months: int) -> date:
    """按整月平移日期，日数超出目标月长度时取月末"""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def period_between(start: date, end: date) -> Tuple[int, int, int]:
    """两个日期之间的年、月、日（不含结束日，end >= start）"""
    total_months = (end.year - start.year) * 12 + end.month - start.month
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - add_months(start, total_months)).days
    return total_months // 12, total_months % 12, days


def format_duration(years: int, months: int) -> str:
    parts = []
    if years > 0:
        parts.append(f"{years} year" if years == 1 else f"{years} years")
    if months > 0:
        parts.append(f"{months} month" if months == 1 else f"{months} months")
    return ", ".join(parts)


def format_month_year(value: date) -> str:
    return value.strftime("%b %Y")
