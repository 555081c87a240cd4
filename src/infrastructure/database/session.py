"""
Database connection management module.
Provides synchronous engine/session factories and the FastAPI session dependency.
"""
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from src.infrastructure.database.models import Base
from src.utils.logger import get_logger

log = get_logger("database")


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    建立同步 engine。

    SQLite 需關閉 check_same_thread，因為 FastAPI 會在 threadpool 中執行同步路由；
    記憶體資料庫改用 StaticPool，讓所有 session 共用同一個連線。
    """
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """建立 session factory。"""
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """建立尚不存在的資料表。"""
    Base.metadata.create_all(bind=engine)
    log.info("資料表已就緒", extra={"tables": sorted(Base.metadata.tables)})


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Provide a synchronous database session dependency.
    Use in FastAPI routes with Depends(get_db).

    Session factory 由應用程式實例持有（app.state.session_factory），
    不使用全域連線。

    Yields:
        SQLAlchemy Session
    """
    db = request.app.state.session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
