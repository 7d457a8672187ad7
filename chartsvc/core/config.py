"""系统配置管理"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from chartsvc.core.constants import (
    QPARAM_TITLE,
    QPARAM_SIZE,
    QPARAM_AXIS_LABEL,
    QPARAM_DATA,
    QPARAM_SERIES_LABEL,
    QPARAM_LINE_STYLE,
    QPARAM_TOKEN_SEPARATOR
)


class Settings(BaseSettings):
    """系统配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # 查询参数名（默认与 Google Chart API 一致）
    qparam_title: str = QPARAM_TITLE
    qparam_size: str = QPARAM_SIZE
    qparam_axis_label: str = QPARAM_AXIS_LABEL
    qparam_data: str = QPARAM_DATA
    qparam_series_label: str = QPARAM_SERIES_LABEL
    qparam_line_style: str = QPARAM_LINE_STYLE
    token_separator: str = QPARAM_TOKEN_SEPARATOR

    # 解析行为开关
    fix_axis_labels: bool = False  # True 时第三个轴标签写入 Z 轴
    strict_line_style: bool = False  # True 时不完整的线型分组报错

    # 服务器配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True

    # 日志配置
    log_level: str = "INFO"
    log_file: Path = Path("./logs/app.log")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # 确保目录存在
        self.log_file.parent.mkdir(parents=True, exist_ok=True)


# 全局配置实例
settings = Settings()
