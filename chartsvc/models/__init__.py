"""数据模型包"""

from chartsvc.models.chart import (
    Coordinate,
    Axis,
    LineStyle,
    Series,
    Chart
)
from chartsvc.models.response import (
    ErrorResponse,
    ServiceInfo
)

__all__ = [
    # Chart
    "Coordinate",
    "Axis",
    "LineStyle",
    "Series",
    "Chart",
    # Response
    "ErrorResponse",
    "ServiceInfo",
]
