from xnumbers.frontend.cli.rich.app import RichView, parse_command, render_board, run

__all__ = ["RichView", "parse_command", "render_board", "run"]
