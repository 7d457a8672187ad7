"""客户端错误定义"""

from typing import Any, Dict

# 错误类型
MALFORMED_DATA = "MALFORMED_DATA"
MALFORMED_SIZE = "MALFORMED_SIZE"
INTERNAL = "INTERNAL"

# 诊断信息
INVALID_DATA_MESSAGE = "invalid data specification (chd)"
INVALID_LINE_STYLE_MESSAGE = "invalid line style specification (ls)"
INVALID_SIZE_MESSAGE = "invalid chart size (chs)"


class BadRequest(Exception):
    """请求参数错误（结构化，对应 HTTP 400）"""

    status_code = 400

    def __init__(self, code: str, message: str, detail: Dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail or {}

    def to_dict(self) -> Dict[str, Any]:
        """转为字典"""
        return {
            "code": self.code,
            "message": self.message,
            "detail": self.detail
        }
