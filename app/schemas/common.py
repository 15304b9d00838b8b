from datetime import datetime
from typing import Dict, List, Optional
from app.schemas.base import CamelModel


class ReorderRequest(CamelModel):
    """排序请求体：按新顺序排列的ID"""
    ordered_ids: List[int]


class ErrorResponse(CamelModel):
    """异常处理器统一返回的错误体"""
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    validation_errors: Optional[Dict[str, str]] = None
