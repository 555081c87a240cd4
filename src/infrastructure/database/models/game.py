"""
Game 模型定義。
遊戲收藏的唯一資料表，每一列為一筆遊戲紀錄。
"""

from sqlalchemy import Column, Integer, Text, Boolean
from .base import Base

class Game(Base):
    """
    遊戲收藏表。

    - **id**: 主鍵，自動遞增；使用 SQLite AUTOINCREMENT，刪除後不會重複使用。
    - **title**: 遊戲名稱（必填）。
    - **platform**: 遊戲平台，例如 PC、Switch。
    - **genre**: 遊戲類型。
    - **hours_played**: 遊玩時數。
    - **completed**: 是否已破關。

    範例：
    ```python
    Game(title="Hades", platform="PC", hours_played=40, completed=True)
    ```
    """
    __tablename__ = "games"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="主鍵，自動遞增"
    )

    title = Column(
        Text,
        nullable=False,
        comment="遊戲名稱"
    )

    platform = Column(Text, nullable=True, comment="遊戲平台")
    genre = Column(Text, nullable=True, comment="遊戲類型")
    hours_played = Column(Integer, nullable=True, comment="遊玩時數")
    completed = Column(Boolean, nullable=True, comment="是否已破關")

    def __repr__(self):
        return f"<Game id={self.id}, title={self.title!r}>"
