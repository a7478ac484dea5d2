from xnumbers.engine.gamerules.rules import Rules

__all__ = ["Rules"]
