"""基础测试"""

import pytest
from pydantic import ValidationError
from chartsvc.core.config import Settings, settings
from chartsvc.models.chart import Axis, Chart, Coordinate, LineStyle, Series


def test_settings():
    """测试配置加载"""
    assert settings is not None
    assert settings.qparam_data == "chd"
    assert settings.qparam_line_style == "chls"
    assert settings.token_separator == "|"
    assert settings.fix_axis_labels is False
    assert settings.strict_line_style is False


def test_settings_override():
    """测试配置覆盖"""
    custom = Settings(qparam_data="data", fix_axis_labels=True)
    assert custom.qparam_data == "data"
    assert custom.fix_axis_labels is True


def test_series_add_value():
    """测试系列按坐标轴追加"""
    series = Series(id="0")
    series.add_value(Coordinate.X, 1.0)
    series.add_value(Coordinate.Y, 2.0)
    series.add_value(Coordinate.Z, 3.0)
    series.add_value(Coordinate.X, 4.0)
    assert series.xs == [1.0, 4.0]
    assert series.ys == [2.0]
    assert series.zs == [3.0]
    assert series.label is None


def test_line_style_default():
    """测试默认线型"""
    style = LineStyle.default()
    assert (style.width, style.dash_length, style.space_length) == (1.0, 1.0, 1.0)


def test_line_style_rejects_non_positive():
    """测试线型必须为正数"""
    with pytest.raises(ValidationError):
        LineStyle(width=0, dash_length=1, space_length=1)


def test_chart_defaults():
    """测试图表默认值"""
    chart = Chart()
    assert chart.title is None
    assert chart.width is None
    assert chart.height is None
    assert chart.series == []
    assert chart.line_styles == []
    assert chart.legend is False


def test_chart_size_bounds():
    """测试图表尺寸范围 (0, 800)"""
    chart = Chart()
    chart.width = 799
    assert chart.width == 799
    with pytest.raises(ValidationError):
        chart.width = 800
    with pytest.raises(ValidationError):
        chart.height = 0


def test_chart_append():
    """测试系列与线型追加"""
    chart = Chart()
    chart.add_series(Series(id="0"))
    chart.add_series(Series(id="1"))
    chart.add_line_style(LineStyle.default())
    chart.x_axis = Axis(label="time")
    assert [s.id for s in chart.series] == ["0", "1"]
    assert len(chart.line_styles) == 1
    chart.set_line_styles([LineStyle(width=2, dash_length=3, space_length=1)])
    assert chart.line_styles[0].width == 2.0
    assert chart.x_axis.label == "time"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
