"""启动脚本"""

import uvicorn
from chartsvc.core.config import settings
from chartsvc.utils.logger import log


if __name__ == "__main__":
    log.info("="*60)
    log.info("Chart Service - 启动中")
    log.info("="*60)
    log.info(f"服务地址: http://{settings.api_host}:{settings.api_port}")
    log.info(f"API 文档: http://{settings.api_host}:{settings.api_port}/docs")
    log.info(f"调试模式: {settings.debug}")
    log.info(f"修正轴标签: {settings.fix_axis_labels}")
    log.info(f"严格线型: {settings.strict_line_style}")
    log.info("="*60)

    uvicorn.run(
        "chartsvc.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info"
    )
