"""Legal-move listings for interactive input."""

from collections.abc import Callable

import chess


def legal_moves(board: chess.Board) -> list[str]:
    """SAN for every legal move, in python-chess generation order.

    The order carries no ranking. The list is rebuilt on every call.
    """
    return [board.san(move) for move in board.legal_moves]


def legal_moves_line(board: chess.Board) -> str:
    """Legal moves as a single space-separated line."""
    return " ".join(legal_moves(board))


class MoveCompleter:
    """readline completer offering the legal moves of the current position.

    Example:
        completer = MoveCompleter(lambda: game.end().board())
        readline.set_completer(completer.complete)
    """

    def __init__(self, board_provider: Callable[[], chess.Board]) -> None:
        self._board_provider = board_provider
        self._matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Return the ``state``-th legal move starting with ``text``."""
        if state == 0:
            board = self._board_provider()
            self._matches = [m for m in legal_moves(board) if m.startswith(text)]
        if state < len(self._matches):
            return self._matches[state]
        return None
