from xnumbers.models.board import EMPTY, Board, Direction

__all__ = ["EMPTY", "Board", "Direction"]
