from eightpuzzle.engine.playback.player import MovePlayer

__all__ = ["MovePlayer"]
