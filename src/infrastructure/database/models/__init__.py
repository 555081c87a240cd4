from .base import Base
from .game import Game

__all__ = ["Base", "Game"]
