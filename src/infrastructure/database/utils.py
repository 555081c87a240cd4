"""
資料庫工具函數。
提供交易管理與錯誤轉換的輔助功能。
"""
import functools
from contextlib import contextmanager
from typing import TypeVar, Callable, Any, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.utils.exceptions import DatabaseError
from src.utils.logger import get_logger

T = TypeVar('T')

log = get_logger("database")


def translate_db_errors(func: Callable[..., T]) -> Callable[..., T]:
    """
    裝飾器：將 SQLAlchemyError 轉換為 DatabaseError。

    用法：
    ```python
    @translate_db_errors
    def get_all(self, db: Session) -> List[Game]:
        ...
    ```
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            log.error("資料庫操作失敗", extra={"operation": func.__qualname__, "error": str(e)})
            raise DatabaseError(str(e)) from e

    return wrapper


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    上下文管理器：將區塊內的所有操作視為單一交易。

    區塊正常結束時提交；發生任何例外時回滾，資料庫維持區塊開始前的狀態。

    用法：
    ```python
    with transaction(db):
        repo.delete_all(db)
        repo.create_many(items, db)
    ```
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("交易失敗，已回滾", extra={"error": str(e)})
        raise DatabaseError(str(e)) from e
    except Exception:
        db.rollback()
        raise
