"""Rich terminal frontend — the board as a table, labels as panels.

Observes a ``GameSession`` and turns typed commands into move requests:
a tile label presses that tile, ``b`` (or Enter) the primary button,
``h`` help and ``q`` quits.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from xnumbers.config import SessionConfig
from xnumbers.engine.gameplay import Control, GameSession, SessionObserver
from xnumbers.engine.gamestate import Status
from xnumbers.models.board import EMPTY, Board

console = Console()

# button label, title
_LABELS: dict[Status, tuple[str, str]] = {
    Status.IDLE: ("Start", "Welcome!"),
    Status.PLAYING: ("Abort", "Playing..."),
    Status.ABORTED: ("Reset", "Game aborted!"),
    Status.ENDED: ("Restart", "Congratulations!"),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    return f"{int(seconds)} secs"


class Stopwatch:
    """Wall-clock game time, driven by the session's timer transitions."""

    def __init__(self) -> None:
        self._start_time: float | None = None
        self._elapsed: float = 0.0

    @property
    def running(self) -> bool:
        return self._start_time is not None

    @property
    def elapsed(self) -> float:
        if self._start_time is not None:
            return time.monotonic() - self._start_time
        return self._elapsed

    def start(self) -> None:
        self._start_time = time.monotonic()
        self._elapsed = 0.0

    def stop(self) -> None:
        if self._start_time is not None:
            self._elapsed = time.monotonic() - self._start_time
            self._start_time = None


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.height):
        cells: list[str] = []
        for c in range(board.width):
            index = r * board.width + c
            val = board.cells[index]
            if val is EMPTY:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(index):
                cells.append(f"[bold green]{val + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- observer -----------------------------------------------------------------


class RichView(SessionObserver):
    """Keeps the latest session snapshot and draws it on demand."""

    def __init__(self, target: Console | None = None) -> None:
        self.console = target or console
        self.board: Board | None = None
        self.status = Status.IDLE
        self.steps = 0
        self.anchor: tuple[float, float] = (0.0, 0.0)
        self.stopwatch = Stopwatch()
        self.message = ""

    def on_board_changed(self, board: Board, empty_index: int) -> None:
        self.board = board

    def on_state_changed(self, status: Status, steps: int, timer_running: bool) -> None:
        if timer_running and not self.stopwatch.running:
            self.stopwatch.start()
        elif not timer_running and self.stopwatch.running:
            self.stopwatch.stop()
        self.status = status
        self.steps = steps

    def on_spawn(self, x: float, y: float) -> None:
        self.anchor = (x, y)

    def on_help(self, url: str | None) -> None:
        if url:
            self.message = f"[cyan]Help:[/cyan] {url}"
        else:
            self.message = "[yellow]No help available.[/yellow]"

    def draw(self) -> None:
        button, title = _LABELS[self.status]

        lines = [Text(title, style="bold cyan", justify="center")]
        # idle screens show no game data
        if self.status is not Status.IDLE:
            lines.append(
                Text(f"Game time: {_format_time(self.stopwatch.elapsed)}", justify="center")
            )
            lines.append(Text(f"Steps: {self.steps}", justify="center"))

        body: list = [*lines, Text("")]
        if self.board is not None:
            body.append(Align.center(render_board(self.board)))

        controls = Text()
        size = self.board.size if self.board else "N"
        controls.append(f"  1-{size}", style="bold cyan")
        controls.append("  move   ", style="dim")
        controls.append("B", style="bold cyan")
        controls.append(f"  {button}   ", style="dim")
        controls.append("H", style="bold cyan")
        controls.append("  help   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  quit", style="dim")

        x, y = self.anchor
        panel = Panel(
            Group(*body),
            title="[bold]X N U M B E R S[/bold]",
            subtitle=f"[dim]anchor ({x:.1f}, {y:.1f})[/dim]",
            border_style="bright_blue",
            padding=(1, 2),
        )

        self.console.print()
        self.console.print(Align.center(panel))
        if self.message:
            self.console.print(Align.center(Text.from_markup(self.message)))
            self.message = ""
        self.console.print(Align.center(controls))


# -- input --------------------------------------------------------------------


def parse_command(raw: str, size: int) -> int | str | None:
    """Map typed input to a move target, ``"quit"``, or None if unrecognised.

    Tiles are typed by their label, which is the tile value plus one.
    """
    cmd = raw.strip().lower()
    if cmd in ("q", "quit"):
        return "quit"
    if cmd in ("", "b"):
        return Control.PRIMARY
    if cmd in ("h", "?"):
        return Control.HELP
    if cmd.isdigit() and 1 <= int(cmd) <= size:
        return int(cmd) - 1
    return None


# -- game loop ----------------------------------------------------------------


def run(config: SessionConfig) -> None:
    """Run an interactive session until the player quits."""
    view = RichView()
    session = GameSession(config, observer=view)

    while True:
        view.draw()
        raw = Prompt.ask("  Command", default="", show_default=False, console=view.console)
        target = parse_command(raw, config.size)
        if target == "quit":
            view.console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if target is None:
            view.message = f"[yellow]Unknown command {raw.strip()!r}.[/yellow]"
            continue
        session.request_move(target)
