"""Interactive human-vs-engine session loop.

The loop alternates between reading the human's move from the terminal and
asking the engine for a reply, until the game ends or the human quits.
Talking to the engine process is left to ``chess.engine``.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

import chess
import chess.engine
import chess.pgn
from loguru import logger
from rich.console import Console
from rich.markup import escape

from pinata.errors import SessionIOError
from pinata.game.advisory import MoveCompleter, legal_moves_line
from pinata.game.display import draw_board
from pinata.game.outcome import RESIGNATION, Outcome, game_outcome, report_if_over
from pinata.session.config import SessionConfig
from pinata.session.store import save_session
from pinata.session.tags import RESULT, set_tag
from pinata.utils.console import get_console

HELP_TEXT = """\
Enter a move in SAN (e.g. Nf3, exd5, O-O) or UCI (e.g. g1f3).
Commands:
  moves          list the legal moves
  board          show the board
  save [file]    save the game (defaults to the autosave file)
  resign         resign the game
  quit           save and leave
  help           show this message"""


class Engine(Protocol):
    """The part of ``chess.engine.SimpleEngine`` the loop relies on."""

    def play(
        self, board: chess.Board, limit: chess.engine.Limit
    ) -> chess.engine.PlayResult: ...


def parse_move(board: chess.Board, text: str) -> chess.Move | None:
    """Parse SAN or UCI input. Returns None if it is not a legal move."""
    try:
        move = board.parse_san(text)
    except ValueError:
        pass
    else:
        return move or None  # reject null moves ("--")

    try:
        move = chess.Move.from_uci(text)
    except ValueError:
        return None
    return move if move in board.legal_moves else None


def _install_completer(completer: MoveCompleter) -> None:
    """Hook move completion into readline where the platform has it."""
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable, move completion disabled")
        return

    readline.set_completer(completer.complete)
    readline.set_completer_delims(" ")
    readline.parse_and_bind("tab: complete")


class GameLoop:
    """Plays one session between the human and an engine.

    Example:
        with chess.engine.SimpleEngine.popen_uci(config.engine_binary) as engine:
            GameLoop(game, config, engine, autosave="pinata.pgn").run()
    """

    def __init__(
        self,
        game: chess.pgn.Game,
        session: SessionConfig,
        engine: Engine,
        *,
        movetime: float = 1.0,
        visual: bool = True,
        autosave: str | Path | None = None,
        console: Console | None = None,
        read_input: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the loop.

        Args:
            game: Game record to continue. Moves are appended to its mainline.
            session: Which side the human plays and against which engine.
            engine: Engine used for the non-human side.
            movetime: Seconds the engine may think per move.
            visual: Whether to print the board after each move.
            autosave: File written when the session ends. None disables it.
            console: Console for output. Defaults to the shared console.
            read_input: Prompt function. Defaults to ``input`` with readline
                move completion.
        """
        self.game = game
        self.session = session
        self.engine = engine
        self.movetime = movetime
        self.visual = visual
        self.autosave = Path(autosave) if autosave else None
        self.console = get_console(console)
        self._read_input = read_input
        self._quit = False

    @property
    def board(self) -> chess.Board:
        """Current position (a fresh copy on every access)."""
        return self.game.end().board()

    def run(self) -> Outcome:
        """Play until the game ends or the human quits.

        Returns:
            The outcome at the point the loop stopped.
        """
        if self._read_input is None:
            _install_completer(MoveCompleter(lambda: self.board))
            self._read_input = input

        try:
            self.show_board()
            while not self._quit and not report_if_over(self.game, self.console):
                if self.board.turn == self.session.human_color:
                    self.human_turn()
                else:
                    self.engine_turn()
        finally:
            if self.autosave is not None:
                self.save(self.autosave)

        outcome, _ = game_outcome(self.game)
        return outcome

    def show_board(self, force: bool = False) -> None:
        draw_board(
            self.board,
            self.session.human_is_black,
            console=self.console,
            visual=self.visual or force,
        )

    def push(self, move: chess.Move) -> None:
        """Append a move to the game record."""
        self.game.end().add_main_variation(move)
        self.show_board()

    def human_turn(self) -> None:
        """Read input until a move is played or the human quits/resigns."""
        while True:
            try:
                line = self._read_input(f"{self.session.human_color_name}> ").strip()
            except EOFError:
                self._quit = True
                return

            if not line:
                continue
            if self.handle_command(line):
                if self._quit or game_outcome(self.game)[0].is_over:
                    return
                continue

            board = self.board
            move = parse_move(board, line)
            if move is None:
                self.console.print(
                    f"[bold red]Illegal move:[/bold red] {escape(line)}. "
                    "Type [bold]moves[/bold] to list legal moves."
                )
                continue

            logger.debug(f"Human plays {board.san(move)}")
            self.push(move)
            return

    def engine_turn(self) -> None:
        """Ask the engine for a move and play it."""
        board = self.board
        result = self.engine.play(board, chess.engine.Limit(time=self.movetime))
        if result.resigned or result.move is None:
            logger.info("Engine resigned")
            self.console.print(
                f"[bold yellow]{escape(self.session.engine_binary)}[/bold yellow] resigns."
            )
            self.resign(self.session.engine_color)
            return

        san = board.san(result.move)
        logger.debug(f"Engine plays {san}")
        self.console.print(f"{escape(self.session.engine_binary)} plays [bold]{san}[/bold]")
        self.push(result.move)

    def resign(self, color: chess.Color) -> None:
        """Record a resignation by ``color``."""
        winner = Outcome.BLACK_WON if color == chess.WHITE else Outcome.WHITE_WON
        set_tag(self.game, "Termination", RESIGNATION)
        set_tag(self.game, RESULT, str(winner))

    def save(self, path: str | Path) -> bool:
        """Save the session. Failures are reported by ``save_session``."""
        try:
            save_session(self.game, self.session, path, console=self.console)
        except SessionIOError:
            return False
        return True

    def handle_command(self, line: str) -> bool:
        """Run an in-game command.

        Returns:
            True if ``line`` was a command, False if it should be treated
            as a move.
        """
        command, _, argument = line.partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command == "help":
            self.console.print(escape(HELP_TEXT))
        elif command == "moves":
            self.console.print(legal_moves_line(self.board))
        elif command == "board":
            self.show_board(force=True)
        elif command == "save":
            target = argument or self.autosave
            if target is None:
                self.console.print("[bold red]No file name given.[/bold red]")
            else:
                self.save(target)
        elif command == "resign":
            self.resign(self.session.human_color)
        elif command == "quit":
            self._quit = True
        else:
            return False
        return True
