"""
Application settings.
從環境變數或 .env 檔案讀取設定。
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    應用程式設定。

    - **app_env**: 執行環境（development / production / test）
    - **app_host** / **app_port**: API 服務監聽位址
    - **database_url**: SQLAlchemy 連線字串
    - **auto_create_tables**: 啟動時是否自動建立資料表
    - **api_base_url**: 用戶端連線的 API 位址
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 3001

    database_url: str = "sqlite:///./game_collection.db"
    database_echo: bool = False
    auto_create_tables: bool = True

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # 用戶端設定
    api_base_url: str = "http://localhost:3001"
    api_timeout: float = 10.0


settings = Settings()
