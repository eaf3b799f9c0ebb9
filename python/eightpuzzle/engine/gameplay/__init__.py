from eightpuzzle.engine.gameplay.game import GamePlay

__all__ = ["GamePlay"]
