"""Terminal-state detection and reporting.

python-chess signals the end of a game through ``Board.outcome()``. This
module maps that signal onto the four outcomes pinata knows about and
announces the result on the console.
"""

from enum import Enum

import chess
import chess.pgn
from rich.console import Console
from rich.markup import escape

from pinata.errors import OutcomeInvariantError
from pinata.utils.console import get_console

RESIGNATION = "resignation"

_METHOD_NAMES = {
    chess.Termination.CHECKMATE: "Checkmate",
    chess.Termination.STALEMATE: "Stalemate",
    chess.Termination.INSUFFICIENT_MATERIAL: "Insufficient material",
    chess.Termination.SEVENTYFIVE_MOVES: "75-move rule",
    chess.Termination.FIVEFOLD_REPETITION: "Fivefold repetition",
    chess.Termination.FIFTY_MOVES: "50-move rule",
    chess.Termination.THREEFOLD_REPETITION: "Threefold repetition",
}


class Outcome(Enum):
    """Game outcome. Values are the PGN result tokens."""

    UNDECIDED = "*"
    DRAW = "1/2-1/2"
    WHITE_WON = "1-0"
    BLACK_WON = "0-1"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_result(cls, result: str) -> "Outcome":
        """Map a PGN result token to an Outcome.

        Raises:
            OutcomeInvariantError: If the token is not one of the four
                results python-chess is documented to produce.
        """
        try:
            return cls(result)
        except ValueError:
            raise OutcomeInvariantError(result) from None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.UNDECIDED


def method_name(termination: chess.Termination) -> str:
    """Human-readable name for a python-chess termination."""
    if termination in _METHOD_NAMES:
        return _METHOD_NAMES[termination]
    return termination.name.replace("_", " ").capitalize()


def game_outcome(target: chess.pgn.Game | chess.Board) -> tuple[Outcome, str]:
    """Classify the current state of a game.

    Args:
        target: A game record (its mainline end position is inspected) or
            a board.

    Returns:
        Tuple of (outcome, method). The method is empty while the game is
        undecided.
    """
    if isinstance(target, chess.pgn.Game):
        board = target.end().board()
        if target.headers.get("Termination") == RESIGNATION:
            resigned = Outcome.from_result(target.headers.get("Result", "*"))
            if resigned.is_over:
                return resigned, "Resignation"
    else:
        board = target

    outcome = board.outcome()
    if outcome is None:
        return Outcome.UNDECIDED, ""
    return Outcome.from_result(outcome.result()), method_name(outcome.termination)


def report_if_over(
    target: chess.pgn.Game | chess.Board, console: Console | None = None
) -> bool:
    """Announce the result if the game has ended.

    Args:
        target: Game record or board to inspect. It is not modified.
        console: Console to print on. Defaults to the shared console.

    Returns:
        True if the game is over, False otherwise.
    """
    outcome, method = game_outcome(target)
    if outcome is Outcome.UNDECIDED:
        return False

    if outcome is Outcome.DRAW:
        headline = "Game Draw"
    elif outcome is Outcome.WHITE_WON:
        headline = "White Won"
    else:
        headline = "Black Won"

    get_console(console).print(
        f"[bold yellow]{headline}[/bold yellow] ([bold]{escape(method)}[/bold])"
    )
    return True
