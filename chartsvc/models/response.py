"""API 响应模型"""

from typing import Dict, Any
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """错误响应"""
    code: str = Field(..., description="错误代码: MALFORMED_DATA, MALFORMED_SIZE, INTERNAL")
    message: str = Field(..., description="错误信息")
    detail: Dict[str, Any] = Field(default_factory=dict, description="错误详情")


class ServiceInfo(BaseModel):
    """服务信息"""
    name: str = Field(..., description="服务名称")
    version: str = Field(..., description="版本")
    status: str = Field(..., description="运行状态")
