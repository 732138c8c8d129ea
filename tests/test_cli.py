"""Tests for the command-line interface."""

import sys
from collections.abc import Iterator
from pathlib import Path

import chess.engine
import pytest
from loguru import logger
from typer.testing import CliRunner

from conftest import FOOLS_MATE, FakeEngine, game_with_moves
from pinata import __version__
from pinata.cli import app
from pinata.session import SessionConfig, read_session, write_session

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """The play command reconfigures loguru; put the default sink back."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def fake_engine(monkeypatch: pytest.MonkeyPatch) -> FakeEngine:
    engine = FakeEngine(["e5", "Nc6", "Nf6"])
    monkeypatch.setattr(chess.engine.SimpleEngine, "popen_uci", lambda *args, **kwargs: engine)
    return engine


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"Pinata v{__version__}" in result.output


class TestShow:
    """Tests for the show command."""

    def test_in_progress_game(self, tmp_path: Path, white_session: SessionConfig) -> None:
        path = tmp_path / "game.pgn"
        write_session(game_with_moves(white_session, ["e4"]), white_session, path)

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "You are playing White against enginebin." in result.output
        assert "Black to move:" in result.output

    def test_finished_game(self, tmp_path: Path, white_session: SessionConfig) -> None:
        path = tmp_path / "game.pgn"
        write_session(game_with_moves(white_session, FOOLS_MATE), white_session, path)

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "Black Won (Checkmate)" in result.output

    def test_foreign_file(self, tmp_path: Path) -> None:
        path = tmp_path / "foreign.pgn"
        path.write_text('[Event "Casual"]\n\n1. e4 e5 *\n')

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1

    def test_resignation_with_bad_result(self, tmp_path: Path) -> None:
        """A corrupt result is reported like any unloadable file."""
        path = tmp_path / "resigned.pgn"
        path.write_text(
            '[Annotator "pinata"]\n[White "Human"]\n[Black "enginebin"]\n'
            '[Result "2-0"]\n[Termination "resignation"]\n\n1. e4 *\n'
        )

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unable to initialize a new game" in result.output


class TestPlay:
    """Tests for the play command."""

    def test_new_game(self, tmp_path: Path, fake_engine: FakeEngine) -> None:
        autosave = tmp_path / "autosave.pgn"

        result = runner.invoke(
            app,
            ["play", "--engine", "fakefish", "--blind", f"autosave={autosave}"],
            input="e4\nquit\n",
        )

        assert result.exit_code == 0, result.output
        game, config = read_session(autosave)
        assert config == SessionConfig(human_is_black=False, engine_binary="fakefish")
        assert [m.uci() for m in game.mainline_moves()] == ["e2e4", "e7e5"]

    def test_resume_as_black(
        self, tmp_path: Path, fake_engine: FakeEngine, black_session: SessionConfig
    ) -> None:
        """A resumed session keeps the saved side and engine, not the flags."""
        saved = tmp_path / "saved.pgn"
        autosave = tmp_path / "autosave.pgn"
        write_session(game_with_moves(black_session, ["d4"]), black_session, saved)
        fake_engine.replies = ["c4"]

        result = runner.invoke(
            app,
            ["play", "--load", str(saved), "--white", "--blind", f"autosave={autosave}"],
            input="Nf6\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert "You are playing Black against /usr/games/stockfish." in result.output
        game, config = read_session(autosave)
        assert config == black_session
        assert [m.uci() for m in game.mainline_moves()] == ["d2d4", "g8f6", "c2c4"]

    def test_failed_load_starts_new_game(self, tmp_path: Path, fake_engine: FakeEngine) -> None:
        autosave = tmp_path / "autosave.pgn"
        fake_engine.replies = ["e4"]

        result = runner.invoke(
            app,
            [
                "play",
                "--load",
                str(tmp_path / "missing.pgn"),
                "--black",
                "--engine",
                "fakefish",
                "--blind",
                f"autosave={autosave}",
            ],
            input="quit\n",
        )

        assert result.exit_code == 0, result.output
        assert "Starting a new game instead." in result.output
        game, config = read_session(autosave)
        assert config.human_is_black is True
        assert [m.uci() for m in game.mainline_moves()] == ["e2e4"]

    def test_engine_missing(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["play", "--engine", str(tmp_path / "no-such-engine"), "--blind"],
            input="quit\n",
        )
        assert result.exit_code == 1

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["play", "--config", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    @pytest.mark.parametrize("engine", ["Human", "?"])
    def test_unusable_engine_name(
        self, tmp_path: Path, fake_engine: FakeEngine, engine: str
    ) -> None:
        autosave = tmp_path / "autosave.pgn"

        result = runner.invoke(
            app,
            ["play", "--engine", engine, "--blind", f"autosave={autosave}"],
            input="quit\n",
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert not autosave.exists()
