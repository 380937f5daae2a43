from .game_base import Game
from .frame_data import FrameData, Press
from .config import EngineConfig

__all__ = ["Game", "FrameData", "Press", "EngineConfig"]
