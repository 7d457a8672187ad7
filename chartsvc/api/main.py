"""FastAPI 主应用"""

from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chartsvc.core.config import settings
from chartsvc.engines.chart_parser import get_chart_parser
from chartsvc.models.chart import Chart
from chartsvc.models.response import ErrorResponse, ServiceInfo
from chartsvc.utils.errors import BadRequest
from chartsvc.utils.logger import log


SERVICE_NAME = "Chart Service"
SERVICE_VERSION = "0.1.0"

# 创建应用
app = FastAPI(
    title=SERVICE_NAME,
    description="散点图请求解析服务（Google Chart API 风格参数，支持 3D）",
    version=SERVICE_VERSION,
    debug=settings.debug
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BadRequest)
async def bad_request_handler(request: Request, exc: BadRequest):
    """参数错误统一返回 400"""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump()
    )


def first_values(request: Request) -> Dict[str, str]:
    """查询参数 → 参数名到第一个值的映射"""
    params: Dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, value)
    return params


@app.get("/", response_model=ServiceInfo)
async def root():
    """根路径"""
    return ServiceInfo(name=SERVICE_NAME, version=SERVICE_VERSION, status="running")


@app.get("/health")
async def health():
    """健康检查"""
    return {"status": "healthy"}


@app.get("/chart/scatter", response_model=Chart, responses={400: {"model": ErrorResponse}})
async def scatter(request: Request):
    """
    解析 2D 散点图请求

    参数：chtt, chs, chxl, chd, chdl, chls
    """
    log.info(f"收到 2D 图表请求: {request.url.query}")
    return get_chart_parser().parse(first_values(request), is_3d=False)


@app.get("/chart/scatter3d", response_model=Chart, responses={400: {"model": ErrorResponse}})
async def scatter3d(request: Request):
    """解析 3D 散点图请求（每个系列含 X/Y/Z 三组坐标）"""
    log.info(f"收到 3D 图表请求: {request.url.query}")
    return get_chart_parser().parse(first_values(request), is_3d=True)


if __name__ == "__main__":
    import uvicorn

    log.info(f"启动服务: {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "chartsvc.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
