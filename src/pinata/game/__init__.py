"""Game-state queries layered over python-chess."""

from pinata.game.advisory import MoveCompleter, legal_moves, legal_moves_line
from pinata.game.display import draw_board, render_board
from pinata.game.outcome import Outcome, game_outcome, method_name, report_if_over

__all__ = [
    "MoveCompleter",
    "Outcome",
    "draw_board",
    "game_outcome",
    "legal_moves",
    "legal_moves_line",
    "method_name",
    "render_board",
    "report_if_over",
]
