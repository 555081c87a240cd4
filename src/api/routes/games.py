"""
Game 收藏相關的 API 路由。
提供遊戲紀錄 CRUD 與整批操作的 HTTP 端點。

例外不在路由中處理，由 src.api.middleware.error_handler 統一轉換：
找不到遊戲回傳 404，資料庫錯誤回傳 500。
"""
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from src.application.dto.game_dto import (
    GameCreateRequest,
    GameUpdateRequest,
    GameResponse,
    StatusResponse,
    CreateGameResponse,
    ErrorResponse,
)
from src.application.services.game_service import GameService
from src.infrastructure.database.session import get_db

router = APIRouter(prefix="/api", tags=["games"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Game not found"}}

# 依賴注入函數
def get_game_service(db: Session = Depends(get_db)) -> GameService:
    """
    獲取 GameService 實例。
    """
    return GameService(db)


@router.get("", response_model=List[GameResponse])
def list_games(service: GameService = Depends(get_game_service)):
    """
    獲取所有遊戲列表。
    """
    return service.list_games()


@router.post("", response_model=CreateGameResponse)
def create_game(
    request: GameCreateRequest,
    service: GameService = Depends(get_game_service)
):
    """
    新增遊戲到收藏。

    - **title**: 遊戲名稱（必填）
    - **platform**: 遊戲平台
    - **genre**: 遊戲類型
    - **hours_played**: 遊玩時數
    - **completed**: 是否已破關
    """
    return service.create_game(request)


@router.put("", response_model=StatusResponse)
def replace_all_games(
    requests: List[GameCreateRequest],
    service: GameService = Depends(get_game_service)
):
    """
    以請求內容整批取代整個收藏，所有遊戲都會取得新的 ID。
    """
    return service.replace_all(requests)


@router.delete("", response_model=StatusResponse)
def delete_all_games(service: GameService = Depends(get_game_service)):
    """
    刪除所有遊戲。
    """
    return service.delete_all()


@router.get("/{game_id}", response_model=GameResponse, responses=NOT_FOUND_RESPONSE)
def get_game(
    game_id: int = Path(..., description="遊戲 ID"),
    service: GameService = Depends(get_game_service)
):
    """
    根據 ID 獲取特定遊戲。
    """
    return service.get_game(game_id)


@router.put("/{game_id}", response_model=StatusResponse, responses=NOT_FOUND_RESPONSE)
def update_game(
    request: GameUpdateRequest,
    game_id: int = Path(..., description="遊戲 ID"),
    service: GameService = Depends(get_game_service)
):
    """
    更新特定遊戲，請求內容整筆取代五個可變欄位。
    """
    return service.update_game(game_id, request)


@router.delete("/{game_id}", response_model=StatusResponse, responses=NOT_FOUND_RESPONSE)
def delete_game(
    game_id: int = Path(..., description="遊戲 ID"),
    service: GameService = Depends(get_game_service)
):
    """
    刪除特定遊戲。
    """
    return service.delete_game(game_id)
