"""
Game repository for database operations.
"""
from typing import Any, Dict, Iterable, List

from sqlalchemy import delete
from sqlalchemy.orm import Session

from src.infrastructure.database.base_repo import BaseRepository
from src.infrastructure.database.models.game import Game
from src.infrastructure.database.utils import translate_db_errors

class GameRepository(BaseRepository[Game]):
    """
    遊戲收藏的 Repository，除了繼承的 CRUD 之外提供整批操作。

    用法示例:
    ```python
    game_repo = GameRepository()
    with transaction(db):
        game_repo.delete_all(db)
        game_repo.create_many([{"title": "Hades"}], db)
    ```
    """
    model = Game

    @translate_db_errors
    def delete_all(self, db: Session) -> int:
        """
        刪除所有遊戲紀錄。

        Returns:
            被刪除的筆數
        """
        result = db.execute(delete(Game))
        return result.rowcount

    def create_many(self, items: Iterable[Dict[str, Any]], db: Session) -> List[Game]:
        """
        依序建立多筆遊戲紀錄，每筆都會取得新的 id。
        """
        return [self.create(item, db) for item in items]
