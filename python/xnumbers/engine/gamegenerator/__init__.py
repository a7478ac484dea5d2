from xnumbers.engine.gamegenerator.generator import DEFAULT_SHUFFLE_DEPTH, GameGenerator

__all__ = ["DEFAULT_SHUFFLE_DEPTH", "GameGenerator"]
