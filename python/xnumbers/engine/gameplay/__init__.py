from xnumbers.engine.gameplay.game import Control, GameSession, SessionObserver

__all__ = ["Control", "GameSession", "SessionObserver"]
