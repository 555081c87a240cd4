"""
api_client.py — Game Collection API client
===========================================
每個方法對應一個 HTTP 端點，回傳解析後的 JSON。

用法：
    client = CollectionApiClient()
    games = client.list_games()
"""
from typing import Any, Dict, List, Optional

import httpx

from src.config import settings
from src.utils.logger import get_logger

log = get_logger("client.api")


class ApiError(Exception):
    """API 回傳錯誤狀態碼或連線失敗。status_code 為 None 表示沒有收到回應。"""

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}" if status_code else message)


class GameNotFoundError(ApiError):
    """指定的遊戲不存在 (404)。"""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return str(body)


class CollectionApiClient:
    """
    遊戲收藏 API 的同步用戶端。

    Args:
        base_url: API 位址，預設為 settings.api_base_url
        http: 既有的 httpx.Client（例如 FastAPI TestClient），提供時忽略 base_url
        timeout: 請求逾時秒數
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self._http = http or httpx.Client(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.api_timeout,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CollectionApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            log.warning("API 連線失敗", extra={"method": method, "path": path, "error": str(e)})
            raise ApiError(None, str(e)) from e

        if response.status_code == 404:
            raise GameNotFoundError(404, _error_message(response))
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(response.status_code, f"Invalid JSON response: {e}") from e

    # ── Collection ──────────────────────────────────

    def list_games(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api")

    def create_game(self, game: Dict[str, Any]) -> Dict[str, Any]:
        """新增遊戲，回傳 {"status", "id"}。"""
        body = self._request("POST", "/api", json=game)
        if not isinstance(body, dict) or not isinstance(body.get("id"), int):
            raise ApiError(None, f"Malformed create response: {body!r}")
        return body

    def replace_all(self, games: List[Dict[str, Any]]) -> Dict[str, Any]:
        return self._request("PUT", "/api", json=games)

    def delete_all(self) -> Dict[str, Any]:
        return self._request("DELETE", "/api")

    # ── Single game ─────────────────────────────────

    def get_game(self, game_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/{game_id}")

    def update_game(self, game_id: int, game: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/{game_id}", json=game)

    def delete_game(self, game_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/{game_id}")
