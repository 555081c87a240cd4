"""
Base repository class for database operations.
Provides common synchronous CRUD operations for all entity repositories.
"""
from typing import TypeVar, Generic, Type, List, Any, Dict, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.utils.exceptions import ResourceNotFoundError
from src.infrastructure.database.utils import translate_db_errors

# Type variable for the entity model
T = TypeVar('T')

# SQLite INTEGER 範圍
INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1

class BaseRepository(Generic[T]):
    """
    基礎資料庫 Repository 類，提供通用的 CRUD 操作。

    Repository 不負責提交交易，由呼叫端（服務層）決定交易範圍。

    用法示例:
    ```python
    class GameRepository(BaseRepository[Game]):
        model = Game

    game_repo = GameRepository()
    games = game_repo.get_all(db)
    game = game_repo.get_by_id(1, db)
    ```
    """
    # 子類需要覆寫此屬性
    model: Type[Any] = None

    def __init__(self):
        """初始化 repository。"""
        if self.__class__.model is None:
            raise NotImplementedError("Repository class must define 'model' attribute")

    def _not_found(self, id: int) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            message=f"{self.model.__name__} with id {id} not found",
            resource_type=self.model.__name__.lower(),
            resource_id=str(id)
        )

    def _get_or_raise(self, id: int, db: Session) -> T:
        # 超出 64 位元整數範圍的 id 不可能存在，也無法傳給資料庫驅動
        if not INTEGER_MIN <= id <= INTEGER_MAX:
            raise self._not_found(id)
        entity = db.get(self.model, id)
        if entity is None:
            raise self._not_found(id)
        return entity

    @translate_db_errors
    def get_by_id(self, id: int, db: Session) -> T:
        """
        根據 ID 取得實體。

        Args:
            id: 實體 ID
            db: 數據庫 Session

        Returns:
            實體對象

        Raises:
            ResourceNotFoundError: 如果找不到實體
        """
        entity = self._get_or_raise(id, db)
        return entity

    @translate_db_errors
    def get_all(self, db: Session) -> List[T]:
        """
        取得所有實體列表，依主鍵排序（即建立順序）。
        """
        pk = self.model.__mapper__.primary_key[0]
        stmt = select(self.model).order_by(pk)
        return list(db.execute(stmt).scalars().all())

    @translate_db_errors
    def create(self, data: Union[Dict[str, Any], T], db: Session) -> T:
        """
        創建新實體。

        Args:
            data: 實體數據或實體對象
            db: 數據庫 Session

        Returns:
            新創建的實體（已 flush，主鍵已指派）
        """
        # 根據輸入類型處理
        if isinstance(data, dict):
            entity = self.model(**data)
        else:
            entity = data

        db.add(entity)
        db.flush()
        db.refresh(entity)

        return entity

    @translate_db_errors
    def update(self, id: int, data: Dict[str, Any], db: Session) -> T:
        """
        更新實體。

        Args:
            id: 實體 ID
            data: 要更新的數據，不存在於模型上的欄位會被忽略
            db: 數據庫 Session

        Returns:
            更新後的實體

        Raises:
            ResourceNotFoundError: 如果找不到實體
        """
        entity = self._get_or_raise(id, db)

        # 更新實體屬性
        for key, value in data.items():
            if hasattr(entity, key) and key != "id":
                setattr(entity, key, value)

        db.flush()
        db.refresh(entity)

        return entity

    @translate_db_errors
    def delete(self, id: int, db: Session) -> None:
        """
        刪除實體。

        Raises:
            ResourceNotFoundError: 如果找不到實體
        """
        entity = self._get_or_raise(id, db)

        db.delete(entity)
        db.flush()
