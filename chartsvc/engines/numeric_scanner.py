"""Numeric Scanner - 数值流扫描器

逐字符扫描由 `,` 和 `|` 分隔的十进制数，产出 (数值文本, 分隔符) 事件。
数据参数 (chd) 和线型参数 (chls) 的解析都建立在它之上。
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from chartsvc.core.constants import NUMBER_CHARS, VALUE_SEPARATOR, STREAM_SEPARATOR
from chartsvc.utils.errors import BadRequest, MALFORMED_DATA, INVALID_DATA_MESSAGE


@dataclass(frozen=True)
class NumericToken:
    """数值片段"""
    text: str
    separator: Optional[str]  # ",", "|"，输入结束时为 None
    offset: int

    @property
    def end(self) -> int:
        """片段结束位置（即分隔符所在位置）"""
        return self.offset + len(self.text)


class NumericStream:
    """`,` / `|` 分隔的数值流"""

    def __init__(
        self,
        text: str,
        start: int = 0,
        message: str = INVALID_DATA_MESSAGE,
        param: Optional[str] = None
    ):
        """
        Args:
            text: 原始参数值
            start: 开始扫描的位置（跳过前缀）
            message: 出错时的诊断信息
            param: 参数名（写入错误详情）
        """
        self.text = text
        self.start = start
        self.message = message
        self.param = param

    def __iter__(self) -> Iterator[NumericToken]:
        base = self.start
        for pos in range(self.start, len(self.text)):
            c = self.text[pos]
            if c in NUMBER_CHARS:
                continue
            if c == VALUE_SEPARATOR or c == STREAM_SEPARATOR:
                yield NumericToken(self.text[base:pos], c, base)
                base = pos + 1
                continue
            # 非 ASCII 字符同样落在这里
            raise self.error(pos, char=c)
        yield NumericToken(self.text[base:], None, base)

    def number(self, token: NumericToken) -> float:
        """将片段解析为浮点数"""
        try:
            return float(token.text)
        except ValueError as e:
            raise self.error(token.offset, token=token.text) from e

    def error(self, position: int, **detail: Any) -> BadRequest:
        """构造 MalformedData 错误"""
        info = {"position": position, **detail}
        if self.param:
            info["param"] = self.param
        return BadRequest(MALFORMED_DATA, self.message, info)
