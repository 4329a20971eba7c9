from slidingpuzzle.engine.gamestate.state import GameState, evaluate, is_solved

__all__ = ["GameState", "evaluate", "is_solved"]
