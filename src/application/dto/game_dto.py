"""
Game 相關的 DTO (Data Transfer Objects)。
遊戲收藏 API 的請求與回應資料結構定義。
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# ========== 回應狀態字串 ==========
# 與既有的行動端用戶端相容，保留原本的拼字

CREATE_SUCCESS = "CREATE ENTRY SUCCESFUL"
UPDATE_SUCCESS = "UPDATE GAME ENTRY SUCCESFUL"
DELETE_SUCCESS = "DELETE GAME ENTRY SUCCESFUL"
REPLACE_ALL_SUCCESS = "REPLACE COLLECTION SUCCESFUL"
DELETE_ALL_SUCCESS = "DELETE COLLECTION SUCCESFUL"

GAME_NOT_FOUND = "Game not found"

# SQLite INTEGER 上限
INTEGER_MAX = 2 ** 63 - 1

# ========== 請求 DTO ==========

class GameFields(BaseModel):
    """
    遊戲紀錄的五個可變欄位。未知欄位（例如用戶端的 status）會被忽略。
    """
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="遊戲名稱，不可為空白")
    platform: Optional[str] = Field(None, description="遊戲平台")
    genre: Optional[str] = Field(None, description="遊戲類型")
    hours_played: Optional[int] = Field(None, ge=0, le=INTEGER_MAX, description="遊玩時數")
    completed: Optional[bool] = Field(None, description="是否已破關")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Game title is required")
        return value

class GameCreateRequest(GameFields):
    """
    新增遊戲請求 DTO
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Hades",
                "platform": "PC",
                "genre": "Roguelike",
                "hours_played": 42,
                "completed": True
            }
        }
    )

class GameUpdateRequest(GameFields):
    """
    更新遊戲請求 DTO，整筆取代五個可變欄位；未提供的欄位會被清為 null。
    """

# ========== 回應 DTO ==========

class GameResponse(BaseModel):
    """
    單筆遊戲紀錄
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="遊戲 ID")
    title: str = Field(..., description="遊戲名稱")
    platform: Optional[str] = None
    genre: Optional[str] = None
    hours_played: Optional[int] = None
    completed: Optional[bool] = None

class StatusResponse(BaseModel):
    status: str

class CreateGameResponse(StatusResponse):
    id: int

class ErrorResponse(BaseModel):
    error: str
