"""Board diagrams."""

import chess
from rich.console import Console
from rich.markup import escape

from pinata.utils.console import get_console


def render_board(board: chess.Board, human_is_black: bool = False) -> str:
    """Unicode diagram of ``board``, seen from the human's side."""
    orientation = chess.BLACK if human_is_black else chess.WHITE
    return board.unicode(empty_square=".", orientation=orientation)


def draw_board(
    board: chess.Board,
    human_is_black: bool = False,
    console: Console | None = None,
    visual: bool = True,
) -> None:
    """Print the board, unless playing blind."""
    if not visual:
        return
    get_console(console).print(escape(render_board(board, human_is_black)))
