"""
全局異常處理。
將應用程式例外轉換為 {"error": message} 格式的 JSON 回應。
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.application.dto.game_dto import GAME_NOT_FOUND
from src.utils.exceptions import ResourceNotFoundError, DatabaseError
from src.utils.logger import get_logger

log = get_logger("api.errors")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        # loc 第一個元素為 "body" / "path" / "query"
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        msg = err.get("msg", "invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return "; ".join(messages)


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    log.info("找不到資源", extra={"path": request.url.path, "resource_id": exc.resource_id})
    if exc.resource_type == "game":
        return _error(status.HTTP_404_NOT_FOUND, GAME_NOT_FOUND)
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    log.error("資料庫錯誤", extra={"path": request.url.path, "error": exc.message})
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(422, _format_validation_errors(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("未預期的錯誤", extra={"path": request.url.path})
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def setup_exception_handlers(app: FastAPI) -> None:
    """
    註冊全局異常處理器。
    """
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
