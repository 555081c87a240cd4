"""
Game 領域模型。
行動端以 status 顯示遊玩進度，資料庫只保存 completed 與 hours_played；
此模組負責兩者之間的轉換。
"""

from enum import Enum
from typing import Any, Mapping, Optional


class GameStatus(str, Enum):
    """
    遊玩進度。
    - **NOT_STARTED**: 尚未開始
    - **IN_PROGRESS**: 進行中
    - **COMPLETED**: 已破關
    """
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


def status_of(game: Mapping[str, Any]) -> GameStatus:
    """
    取得遊戲的顯示進度。

    用戶端自行保存的 status 優先；否則由 completed 與 hours_played 推導。
    """
    raw = game.get("status")
    if raw in {s.value for s in GameStatus}:
        return GameStatus(raw)
    if game.get("completed"):
        return GameStatus.COMPLETED
    if game.get("hours_played"):
        return GameStatus.IN_PROGRESS
    return GameStatus.NOT_STARTED


def completed_for(status: Optional[GameStatus]) -> Optional[bool]:
    """將 status 轉為要寫入資料庫的 completed 值；未指定 status 時回傳 None。"""
    if status is None:
        return None
    return GameStatus(status) is GameStatus.COMPLETED
