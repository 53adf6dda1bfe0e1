"""
Custom exception classes for the recipe search assistant
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

# User-facing fallback messages
EMPTY_INPUT_MESSAGE = "请输入食材或菜品名称"
EMPTY_INGREDIENTS_MESSAGE = "请输入有效的食材"
REQUEST_FAILED_MESSAGE = "请求失败"
INVALID_RESPONSE_MESSAGE = "响应格式错误"
GENERIC_SEARCH_FAILURE_MESSAGE = "搜索过程中出现错误，请稍后重试"


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    DUPLICATE_TAG = "duplicate_tag"
    TRANSPORT_FAILURE = "transport_failure"
    SERVICE_REJECTED = "service_rejected"


class RecipeSearchError(Exception):
    """Base exception for the recipe search assistant"""
    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyInput(RecipeSearchError):
    """Raised when there is nothing to search for"""
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class TransportFailure(RecipeSearchError):
    """Raised when the search service cannot be reached or its reply cannot be decoded"""
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str = GENERIC_SEARCH_FAILURE_MESSAGE):
        super().__init__(message)


class ServiceRejected(RecipeSearchError):
    """Raised when the search service answers with success=false or a non-2xx status"""
    kind = ErrorKind.SERVICE_REJECTED

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message or REQUEST_FAILED_MESSAGE)
