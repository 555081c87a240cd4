"""
Game 收藏的服務層邏輯。
處理遊戲紀錄的查詢、新增、更新、刪除與整批取代。
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from src.application.dto.game_dto import (
    GameCreateRequest,
    GameUpdateRequest,
    GameResponse,
    StatusResponse,
    CreateGameResponse,
    CREATE_SUCCESS,
    UPDATE_SUCCESS,
    DELETE_SUCCESS,
    REPLACE_ALL_SUCCESS,
    DELETE_ALL_SUCCESS,
)
from src.infrastructure.database.game_repo import GameRepository
from src.infrastructure.database.utils import transaction
from src.utils.logger import get_logger

log = get_logger("service.game")


class GameService:
    """
    遊戲收藏服務。每個寫入操作都在單一交易中完成。

    用法示例:
    ```python
    service = GameService(db)
    created = service.create_game(GameCreateRequest(title="Hades"))
    game = service.get_game(created.id)
    ```
    """

    def __init__(self, db: Session, repo: Optional[GameRepository] = None):
        self.db = db
        self.repo = repo or GameRepository()

    def list_games(self) -> List[GameResponse]:
        """取得所有遊戲，依建立順序排列。"""
        games = self.repo.get_all(self.db)
        return [GameResponse.model_validate(game) for game in games]

    def get_game(self, game_id: int) -> GameResponse:
        """
        取得單筆遊戲。

        Raises:
            ResourceNotFoundError: 如果找不到遊戲
        """
        game = self.repo.get_by_id(game_id, self.db)
        return GameResponse.model_validate(game)

    def create_game(self, request: GameCreateRequest) -> CreateGameResponse:
        """新增遊戲，回傳狀態與新指派的 id。"""
        with transaction(self.db):
            game = self.repo.create(request.model_dump(), self.db)
        log.info("新增遊戲", extra={"game_id": game.id, "title": game.title})
        return CreateGameResponse(status=CREATE_SUCCESS, id=game.id)

    def update_game(self, game_id: int, request: GameUpdateRequest) -> StatusResponse:
        """
        以請求內容整筆取代遊戲的五個可變欄位，id 不變。

        Raises:
            ResourceNotFoundError: 如果找不到遊戲
        """
        with transaction(self.db):
            self.repo.update(game_id, request.model_dump(), self.db)
        log.info("更新遊戲", extra={"game_id": game_id})
        return StatusResponse(status=UPDATE_SUCCESS)

    def delete_game(self, game_id: int) -> StatusResponse:
        """
        刪除單筆遊戲。

        Raises:
            ResourceNotFoundError: 如果找不到遊戲
        """
        with transaction(self.db):
            self.repo.delete(game_id, self.db)
        log.info("刪除遊戲", extra={"game_id": game_id})
        return StatusResponse(status=DELETE_SUCCESS)

    def replace_all(self, requests: List[GameCreateRequest]) -> StatusResponse:
        """
        刪除所有遊戲後依序建立新的遊戲，每筆都取得新的 id。

        刪除與新增在同一個交易中執行；任何一步失敗都會回滾，
        原本的資料保持不變。
        """
        with transaction(self.db):
            removed = self.repo.delete_all(self.db)
            created = self.repo.create_many((r.model_dump() for r in requests), self.db)
        log.info("整批取代遊戲收藏", extra={"removed": removed, "inserted": len(created)})
        return StatusResponse(status=REPLACE_ALL_SUCCESS)

    def delete_all(self) -> StatusResponse:
        """刪除所有遊戲；收藏為空時同樣成功。"""
        with transaction(self.db):
            removed = self.repo.delete_all(self.db)
        log.info("刪除所有遊戲", extra={"removed": removed})
        return StatusResponse(status=DELETE_ALL_SUCCESS)
