"""Chart Parser - 查询参数 → 图表规范

参数格式仿照 Google Chart API，并扩展了 Z 坐标以支持 3D 图表。
"""

import re
from enum import Enum
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from chartsvc.core.config import Settings, settings
from chartsvc.core.constants import (
    DATA_TEXT_PREFIX,
    SIZE_SEPARATOR,
    STREAM_SEPARATOR,
    MAX_WIDTH,
    MAX_HEIGHT
)
from chartsvc.engines.numeric_scanner import NumericStream, NumericToken
from chartsvc.models.chart import Axis, Chart, Coordinate, LineStyle, Series
from chartsvc.utils.errors import (
    BadRequest,
    MALFORMED_SIZE,
    INVALID_DATA_MESSAGE,
    INVALID_LINE_STYLE_MESSAGE,
    INVALID_SIZE_MESSAGE
)
from chartsvc.utils.logger import log


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_ROTATION: Dict[Coordinate, Coordinate] = {
    Coordinate.X: Coordinate.Y,
    Coordinate.Y: Coordinate.Z,
    Coordinate.Z: Coordinate.X,
}


def rotate_coordinate(coordinate: Coordinate) -> Coordinate:
    """X → Y → Z → X"""
    return _ROTATION[coordinate]


class LineStyleField(Enum):
    """线型分组中的字段顺序"""
    THICKNESS = 0
    DASH_LENGTH = 1
    SPACE_LENGTH = 2


class ChartRequestParser:
    """图表请求解析器"""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    def parse(self, params: Mapping[str, str], is_3d: bool = False) -> Chart:
        """
        从查询参数构造图表规范

        Args:
            params: 参数名 → 第一个参数值
            is_3d: 是否按 3D 图表解析（每个系列含 X/Y/Z 三组坐标）

        Returns:
            Chart: 图表规范

        Raises:
            BadRequest: 任一参数格式错误
        """
        cfg = self.config
        chart = Chart()

        try:
            title = params.get(cfg.qparam_title)
            if title:
                chart.title = title

            self.parse_size(chart, params.get(cfg.qparam_size))
            self.parse_axis_labels(chart, params.get(cfg.qparam_axis_label))

            data = params.get(cfg.qparam_data)
            if data is not None:
                max_coordinate = Coordinate.Z if is_3d else Coordinate.Y
                self.parse_data(chart, data, max_coordinate)

            # 必须在 parse_data 之后：系列对象由数据参数创建
            self.parse_series_labels(chart, params.get(cfg.qparam_series_label))

            line_style = params.get(cfg.qparam_line_style)
            if line_style is None:
                chart.add_line_style(LineStyle.default())
            else:
                self.parse_line_style(chart, line_style)

        except BadRequest as e:
            log.warning(f"图表参数错误: {e.message} {e.detail}")
            raise

        log.info(
            f"解析图表: 3d={is_3d}, series={len(chart.series)}, "
            f"size={chart.width}x{chart.height}, line_styles={len(chart.line_styles)}"
        )
        return chart

    def parse_size(self, chart: Chart, size: Optional[str]):
        """解析尺寸 WIDTHxHEIGHT，超出 (0, 800) 的值直接忽略"""
        if size is None:
            return

        tokens = [t for t in size.split(SIZE_SEPARATOR) if t]
        if len(tokens) > 0:
            width = self._parse_int(tokens[0], size)
            if 0 < width < MAX_WIDTH:
                chart.width = width
            else:
                log.debug(f"忽略超出范围的宽度: {width}")
        if len(tokens) > 1:
            height = self._parse_int(tokens[1], size)
            if 0 < height < MAX_HEIGHT:
                chart.height = height
            else:
                log.debug(f"忽略超出范围的高度: {height}")

    def parse_axis_labels(self, chart: Chart, axis_labels: Optional[str]):
        """按位置解析坐标轴标签"""
        if axis_labels is None:
            return

        coordinate = Coordinate.X
        for label in self._split_labels(axis_labels):
            axis = Axis(label=label)
            if coordinate == Coordinate.X:
                chart.x_axis = axis
            elif coordinate == Coordinate.Y:
                chart.y_axis = axis
            elif self.config.fix_axis_labels:
                chart.z_axis = axis
            else:
                # 保留原有行为：第三个标签覆盖 Y 轴
                chart.y_axis = axis
            coordinate = rotate_coordinate(coordinate)

    def parse_data(self, chart: Chart, data: str, max_coordinate: Coordinate):
        """
        解析数据参数 t:...

        `,` 分隔同一坐标流内的数值；`|` 结束一个坐标流，
        当前坐标为 max_coordinate 时同时结束一个系列。
        """
        if not data.startswith(DATA_TEXT_PREFIX):
            log.debug(f"数据参数缺少 {DATA_TEXT_PREFIX} 前缀，忽略")
            return
        if len(data) == len(DATA_TEXT_PREFIX):
            return

        stream = NumericStream(
            data,
            start=len(DATA_TEXT_PREFIX),
            message=INVALID_DATA_MESSAGE,
            param=self.config.qparam_data
        )
        series_count = 0
        series = Series(id=str(series_count))
        coordinate = Coordinate.X

        for token in stream:
            series.add_value(coordinate, stream.number(token))
            if token.separator != STREAM_SEPARATOR:
                continue
            if coordinate == max_coordinate:
                chart.add_series(series)
                series_count += 1
                series = Series(id=str(series_count))
                coordinate = Coordinate.X
            else:
                coordinate = rotate_coordinate(coordinate)

        chart.add_series(series)

    def parse_series_labels(self, chart: Chart, series_labels: Optional[str]):
        """解析系列标签，按顺序对应已有系列"""
        if series_labels is None:
            return

        labels = self._split_labels(series_labels)
        if labels:
            chart.legend = True
        for series, label in zip(chart.series, labels):
            series.label = label
        if len(labels) > len(chart.series):
            log.debug(f"忽略多余的系列标签: {labels[len(chart.series):]}")

    def parse_line_style(self, chart: Chart, line_style: str):
        """
        解析线型参数

        每组三个数值 width,dash_length,space_length，组之间用 `|` 分隔。
        末尾不完整的分组默认丢弃，strict_line_style 时报错。
        """
        stream = NumericStream(
            line_style,
            message=INVALID_LINE_STYLE_MESSAGE,
            param=self.config.qparam_line_style
        )
        styles: List[LineStyle] = []
        values: Dict[LineStyleField, float] = {}
        field = LineStyleField.THICKNESS

        for token in stream:
            if token.separator is None:
                if field == LineStyleField.SPACE_LENGTH:
                    values[field] = stream.number(token)
                    styles.append(self._build_line_style(values, stream, token))
                elif self.config.strict_line_style:
                    raise stream.error(token.end, reason="incomplete line style group")
                else:
                    log.debug(f"丢弃不完整的线型分组: {line_style[token.offset:]!r}")
            elif token.separator == STREAM_SEPARATOR:
                if field != LineStyleField.SPACE_LENGTH:
                    raise stream.error(token.end, reason="premature group separator")
                values[field] = stream.number(token)
                styles.append(self._build_line_style(values, stream, token))
                values = {}
                field = LineStyleField.THICKNESS
            else:
                if field == LineStyleField.SPACE_LENGTH:
                    raise stream.error(token.end, reason="too many values in group")
                values[field] = stream.number(token)
                field = LineStyleField(field.value + 1)

        if not styles:
            log.debug("线型参数没有完整分组，使用默认线型")
            styles.append(LineStyle.default())
        chart.set_line_styles(styles)

    def _build_line_style(
        self,
        values: Dict[LineStyleField, float],
        stream: NumericStream,
        token: NumericToken
    ) -> LineStyle:
        try:
            return LineStyle(
                width=values[LineStyleField.THICKNESS],
                dash_length=values[LineStyleField.DASH_LENGTH],
                space_length=values[LineStyleField.SPACE_LENGTH]
            )
        except ValidationError as e:
            raise stream.error(token.offset, reason="line style values must be positive") from e

    def _parse_int(self, token: str, size: str) -> int:
        if not _INTEGER_PATTERN.fullmatch(token):
            raise BadRequest(
                MALFORMED_SIZE,
                INVALID_SIZE_MESSAGE,
                {"param": self.config.qparam_size, "value": size, "token": token}
            )
        return int(token)

    def _split_labels(self, labels: str) -> List[str]:
        # 空标签跳过
        return [label for label in labels.split(self.config.token_separator) if label]


# 全局单例
_chart_parser = None


def get_chart_parser() -> ChartRequestParser:
    """获取 ChartRequestParser 单例"""
    global _chart_parser
    if _chart_parser is None:
        _chart_parser = ChartRequestParser()
    return _chart_parser
