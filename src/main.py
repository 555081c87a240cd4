# src/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from src.api.routes import games
from src.api.middleware.error_handler import setup_exception_handlers
from src.config import Settings, settings as default_settings
from src.infrastructure.database.session import create_db_engine, create_session_factory, init_db
from src.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 啟動事件
    app_settings: Settings = app.state.settings
    if app_settings.auto_create_tables:
        init_db(app.state.engine)
    logger.info("API 服務啟動中", extra={
        "environment": app_settings.app_env,
        "port": app_settings.app_port
    })
    yield
    # 關閉事件
    logger.info("API 服務關閉中")
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    建立 FastAPI 應用。

    Args:
        settings: 應用設定，未提供時使用全局設定
        engine: 資料庫 engine，未提供時依 settings.database_url 建立

    Returns:
        設定完成的 FastAPI 實例；engine 與 session factory 存放於 app.state
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Game Collection API",
        description="遊戲收藏管理 API 服務",
        version="0.1.0",
        lifespan=lifespan
    )

    # 資料庫由應用實例持有
    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings.database_url, echo=settings.database_echo)
    app.state.session_factory = create_session_factory(app.state.engine)

    # 設定 CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 設定全局異常處理
    setup_exception_handlers(app)

    # 加載 API 路由
    app.include_router(games.router)

    # 簡單的健康檢查端點
    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "environment": settings.app_env,
            "version": app.version
        }

    return app


app = create_app()
