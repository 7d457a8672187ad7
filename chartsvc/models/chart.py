"""图表规范模型（解析结果）"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from chartsvc.core.constants import (
    MAX_WIDTH,
    MAX_HEIGHT,
    DEFAULT_LINE_WIDTH,
    DEFAULT_DASH_LENGTH,
    DEFAULT_SPACE_LENGTH
)


class Coordinate(str, Enum):
    """坐标轴"""
    X = "x"
    Y = "y"
    Z = "z"


class Axis(BaseModel):
    """坐标轴标签"""
    label: str = Field(..., description="轴标签")


class LineStyle(BaseModel):
    """线型：线宽、虚线段长、间隔长"""
    width: float = Field(DEFAULT_LINE_WIDTH, gt=0, description="线宽")
    dash_length: float = Field(DEFAULT_DASH_LENGTH, gt=0, description="虚线段长度")
    space_length: float = Field(DEFAULT_SPACE_LENGTH, gt=0, description="虚线间隔长度")

    @classmethod
    def default(cls) -> "LineStyle":
        """默认线型 (1.0, 1.0, 1.0)"""
        return cls(
            width=DEFAULT_LINE_WIDTH,
            dash_length=DEFAULT_DASH_LENGTH,
            space_length=DEFAULT_SPACE_LENGTH
        )


class Series(BaseModel):
    """数据系列"""
    id: str = Field(..., description="系列ID（按出现顺序编号）")
    label: Optional[str] = Field(None, description="系列标签")
    xs: List[float] = Field(default_factory=list, description="X 坐标")
    ys: List[float] = Field(default_factory=list, description="Y 坐标")
    zs: List[float] = Field(default_factory=list, description="Z 坐标（仅 3D）")

    def add_x(self, value: float):
        self.xs.append(value)

    def add_y(self, value: float):
        self.ys.append(value)

    def add_z(self, value: float):
        self.zs.append(value)

    def add_value(self, coordinate: Coordinate, value: float):
        """按坐标轴追加数值"""
        if coordinate == Coordinate.X:
            self.add_x(value)
        elif coordinate == Coordinate.Y:
            self.add_y(value)
        else:
            self.add_z(value)


class Chart(BaseModel):
    """图表规范"""
    title: Optional[str] = Field(None, description="图表标题")
    width: Optional[int] = Field(None, gt=0, lt=MAX_WIDTH, description="宽度（像素）")
    height: Optional[int] = Field(None, gt=0, lt=MAX_HEIGHT, description="高度（像素）")
    x_axis: Optional[Axis] = Field(None, description="X 轴")
    y_axis: Optional[Axis] = Field(None, description="Y 轴")
    z_axis: Optional[Axis] = Field(None, description="Z 轴")
    series: List[Series] = Field(default_factory=list, description="数据系列")
    line_styles: List[LineStyle] = Field(default_factory=list, description="线型")
    legend: bool = Field(False, description="是否显示图例")

    model_config = {"validate_assignment": True}

    def add_series(self, series: Series):
        self.series.append(series)

    def add_line_style(self, line_style: LineStyle):
        self.line_styles.append(line_style)

    def set_line_styles(self, line_styles: List[LineStyle]):
        """替换全部线型"""
        self.line_styles = list(line_styles)
