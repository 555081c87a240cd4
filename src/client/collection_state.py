"""
收藏畫面與遊戲詳情畫面的狀態管理。

CollectionState 保存從 API 取得的遊戲列表副本，每次操作成功後直接更新本地列表，
不重新讀取整個收藏；失敗時加入一則提示並保持列表不變。
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.client.api_client import ApiError, CollectionApiClient, GameNotFoundError
from src.domain.models.game import GameStatus, completed_for, status_of
from src.utils.logger import get_logger

log = get_logger("client.state")

PAYLOAD_FIELDS = ("title", "platform", "genre", "hours_played", "completed")


@dataclass
class Alert:
    """顯示給使用者的提示訊息。"""
    title: str
    message: str


class ValidationFailure(Exception):
    """本地驗證失敗，請求不會送出。"""


def build_payload(game: Dict[str, Any]) -> Dict[str, Any]:
    """
    將畫面上的遊戲資料轉為 API 請求內容。

    - 移除 id 等非可變欄位
    - 有 status 時轉為 completed（資料庫沒有 status 欄位）

    Raises:
        ValidationFailure: 遊戲名稱為空白，或 status 不是已知的進度
    """
    title = (game.get("title") or "").strip()
    if not title:
        raise ValidationFailure("Game title is required")

    payload = {field: game.get(field) for field in PAYLOAD_FIELDS}
    payload["title"] = title
    if game.get("status"):
        try:
            status = GameStatus(game["status"])
        except ValueError:
            raise ValidationFailure(f"Unknown status: {game['status']}") from None
        if payload["completed"] is None:
            payload["completed"] = completed_for(status)
    return payload


class CollectionState:
    """
    收藏畫面狀態。

    - **games**: 本地遊戲列表
    - **loading**: 首次讀取完成前為 True
    - **refreshing**: 下拉重新整理進行中
    - **alerts**: 依序累積的提示訊息
    """

    def __init__(self, api: CollectionApiClient):
        self.api = api
        self.games: List[Dict[str, Any]] = []
        self.loading = True
        self.refreshing = False
        self.alerts: List[Alert] = []

    def _alert(self, title: str, message: str) -> None:
        self.alerts.append(Alert(title, message))

    def fetch(self) -> bool:
        """讀取整個收藏並取代本地列表。"""
        self.loading = True
        try:
            self.games = self.api.list_games()
            return True
        except ApiError as e:
            log.warning("讀取收藏失敗", extra={"error": str(e)})
            self._alert("Error", "Failed to load games")
            return False
        finally:
            self.loading = False

    def refresh(self) -> bool:
        """下拉重新整理。"""
        self.refreshing = True
        try:
            return self.fetch()
        finally:
            self.refreshing = False

    def add_game(self, game: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        新增遊戲。成功時將帶有新 id 的遊戲加入列表尾端並回傳。
        """
        try:
            payload = build_payload(game)
        except ValidationFailure as e:
            self._alert("Error", str(e))
            return None

        try:
            response = self.api.create_game(payload)
        except ApiError:
            self._alert("Error", "Failed to add game")
            return None

        created = {**payload, "id": response["id"]}
        if game.get("status"):
            created["status"] = GameStatus(game["status"]).value
        self.games = [*self.games, created]
        return created

    def update_game(self, game: Dict[str, Any]) -> bool:
        """更新遊戲，成功時取代列表中相同 id 的項目。"""
        try:
            payload = build_payload(game)
        except ValidationFailure as e:
            self._alert("Error", str(e))
            return False

        game_id = game["id"]
        try:
            self.api.update_game(game_id, payload)
        except ApiError:
            self._alert("Error", "Failed to update game")
            return False

        updated = {**game, **payload, "id": game_id}
        self.games = [updated if g["id"] == game_id else g for g in self.games]
        return True

    def delete_game(self, game_id: int) -> bool:
        """刪除遊戲，成功時自列表移除。"""
        try:
            self.api.delete_game(game_id)
        except ApiError:
            self._alert("Error", "Failed to delete game")
            return False

        self.games = [g for g in self.games if g["id"] != game_id]
        return True

    def delete_all(self) -> bool:
        """刪除所有遊戲。"""
        try:
            self.api.delete_all()
        except ApiError:
            self._alert("Error", "Failed to delete all games")
            return False

        self.games = []
        self._alert("Success", "All games have been deleted")
        return True


class GameDetailsState:
    """
    遊戲詳情畫面狀態。

    任何讀取失敗（包含 404）都會加入 "Failed to load game details" 提示，
    並將 game 設為 None，畫面據此顯示 "Game not found"。
    """

    def __init__(self, api: CollectionApiClient):
        self.api = api
        self.game: Optional[Dict[str, Any]] = None
        self.loading = True
        self.alerts: List[Alert] = []

    @property
    def not_found(self) -> bool:
        return not self.loading and self.game is None

    @property
    def status(self) -> Optional[GameStatus]:
        return status_of(self.game) if self.game else None

    def load(self, game_id: int) -> Optional[Dict[str, Any]]:
        self.loading = True
        try:
            self.game = self.api.get_game(game_id)
        except ApiError as e:
            if not isinstance(e, GameNotFoundError):
                log.warning("讀取遊戲詳情失敗", extra={"game_id": game_id, "error": str(e)})
            self.game = None
            self.alerts.append(Alert("Error", "Failed to load game details"))
        finally:
            self.loading = False
        return self.game
