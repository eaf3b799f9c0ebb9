from eightpuzzle.models.state import BLANK, CELLS, GOAL_STATE, SIZE, State, position

__all__ = ["BLANK", "CELLS", "GOAL_STATE", "SIZE", "State", "position"]
