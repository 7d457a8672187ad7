"""系统常量定义"""

from typing import FrozenSet

# 查询参数名
QPARAM_TITLE = "chtt"
QPARAM_SIZE = "chs"
QPARAM_AXIS_LABEL = "chxl"
QPARAM_DATA = "chd"
QPARAM_SERIES_LABEL = "chdl"
QPARAM_LINE_STYLE = "chls"

# 分隔符
QPARAM_TOKEN_SEPARATOR = "|"
VALUE_SEPARATOR = ","
STREAM_SEPARATOR = "|"
SIZE_SEPARATOR = "x"

# 数据参数前缀（文本编码）
DATA_TEXT_PREFIX = "t:"

# 数值字符（数字、负号、小数点）
NUMBER_CHARS: FrozenSet[str] = frozenset("0123456789-.")

# 最大限制（不含）
MAX_WIDTH = 800
MAX_HEIGHT = 800

# 默认线型
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_DASH_LENGTH = 1.0
DEFAULT_SPACE_LENGTH = 1.0
