from eightpuzzle.engine.gamegenerator.generator import DEFAULT_STEPS, GameGenerator

__all__ = ["DEFAULT_STEPS", "GameGenerator"]
