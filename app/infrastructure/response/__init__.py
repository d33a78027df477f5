"""响应格式化基础设施组件导出"""

from .response_formatter import (
    standard_response,
    error_response,
    service_error_response,
    validation_error_response,
)

__all__ = [
    "standard_response",
    "error_response",
    "service_error_response",
    "validation_error_response",
]
