from slidingpuzzle.engine.gamegenerator.generator import GameGenerator, ShuffleStrategy

__all__ = ["GameGenerator", "ShuffleStrategy"]
