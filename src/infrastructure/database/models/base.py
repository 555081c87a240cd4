"""
SQLAlchemy declarative base.
所有 ORM 模型皆繼承自此 Base，Alembic 由 Base.metadata 取得資料表定義。
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
