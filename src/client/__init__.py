"""
遊戲收藏 API 的用戶端。

- api_client: 對應每個 HTTP 端點的 httpx 用戶端
- collection_state: 收藏畫面與遊戲詳情畫面的狀態管理
"""
from .api_client import ApiError, CollectionApiClient, GameNotFoundError
from .collection_state import Alert, CollectionState, GameDetailsState

__all__ = [
    "Alert",
    "ApiError",
    "CollectionApiClient",
    "CollectionState",
    "GameDetailsState",
    "GameNotFoundError",
]
