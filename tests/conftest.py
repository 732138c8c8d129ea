"""Pytest configuration and shared fixtures."""

import io

import chess
import chess.engine
import chess.pgn
import pytest
from rich.console import Console

from pinata.session import SessionConfig, new_game

FOOLS_MATE = ["f3", "e5", "g4", "Qh4#"]


@pytest.fixture
def console() -> Console:
    """A plain-text console that records everything printed to it."""
    return Console(file=io.StringIO(), width=1000, color_system=None, highlight=False)


@pytest.fixture
def white_session() -> SessionConfig:
    """Human plays White against 'enginebin'."""
    return SessionConfig(human_is_black=False, engine_binary="enginebin")


@pytest.fixture
def black_session() -> SessionConfig:
    """Human plays Black against a stockfish binary."""
    return SessionConfig(human_is_black=True, engine_binary="/usr/games/stockfish")


def output(console: Console) -> str:
    """Everything printed to a console created by the ``console`` fixture."""
    return console.file.getvalue()


def play(game: chess.pgn.Game, sans: list[str]) -> chess.pgn.Game:
    """Append SAN moves to the mainline of ``game``."""
    node = game.end()
    for san in sans:
        node = node.add_main_variation(node.board().parse_san(san))
    return game


def game_with_moves(session: SessionConfig, sans: list[str]) -> chess.pgn.Game:
    """A fresh pinata game with ``sans`` already played."""
    return play(new_game(session), sans)


class FakeEngine:
    """Stands in for chess.engine.SimpleEngine, replying with scripted SAN moves."""

    def __init__(self, replies: list[str] | None = None, resign: bool = False) -> None:
        self.replies = list(replies or [])
        self.resign = resign
        self.limits: list[chess.engine.Limit] = []
        self.closed = False

    def play(self, board: chess.Board, limit: chess.engine.Limit) -> chess.engine.PlayResult:
        self.limits.append(limit)
        if self.resign or not self.replies:
            return chess.engine.PlayResult(None, None, resigned=True)
        return chess.engine.PlayResult(board.parse_san(self.replies.pop(0)), None)

    def __enter__(self) -> "FakeEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.closed = True


def scripted_input(lines: list[str]):
    """An ``input`` replacement that yields ``lines`` and then raises EOFError."""
    remaining = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read
