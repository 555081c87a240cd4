"""
應用程式自訂例外。
由 src.api.middleware.error_handler 統一轉換為 HTTP 回應。
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    """所有應用程式例外的基底類別。"""

    def __init__(self, message: str, code: str = "app_error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ResourceNotFoundError(AppError):
    """
    找不到指定資源。

    Args:
        message: 錯誤訊息
        resource_type: 資源類型，例如 "game"
        resource_id: 資源識別碼
    """

    def __init__(self, message: str, resource_type: str, resource_id: str):
        super().__init__(
            message,
            code="not_found",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DatabaseError(AppError):
    """資料庫操作失敗（約束違反、I/O 錯誤等），訊息保留底層錯誤內容。"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="database_error", details=details)
