from slidingpuzzle.engine.gamesolver.solver import Solver

__all__ = ["Solver"]
