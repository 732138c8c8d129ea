"""Load and save pinata sessions as PGN files.

A session file is an ordinary PGN game whose tags also record who was
playing: the ``Annotator`` tag marks the file as written by pinata and the
White/Black tags say which side the human held (see ``session.config``).
Only files carrying that provenance can be resumed.
"""

import io
from datetime import date
from pathlib import Path

import chess
import chess.pgn
from loguru import logger
from rich.console import Console
from rich.markup import escape

from pinata.errors import (
    GameInitError,
    OutcomeInvariantError,
    PGNParseError,
    ProvenanceError,
    SessionError,
    SessionIOError,
)
from pinata.game.outcome import game_outcome
from pinata.session.config import (
    PROVENANCE_MARKER,
    SessionConfig,
    decode_session,
    encode_session,
)
from pinata.session.tags import ANNOTATOR, BLACK, DATE, RESULT, WHITE, get_tag, set_tag
from pinata.utils.console import get_console


def format_date(day: date) -> str:
    """Format a date the way pinata writes the Date tag (YYYY-MM-DD)."""
    return f"{day.year}-{day.month:02d}-{day.day:02d}"


def new_game(config: SessionConfig) -> chess.pgn.Game:
    """Create a fresh game record already tagged for ``config``."""
    game = chess.pgn.Game()
    set_tag(game, ANNOTATOR, PROVENANCE_MARKER)
    for key, value in encode_session(config).items():
        set_tag(game, key, value)
    return game


def read_session(path: str | Path | None) -> tuple[chess.pgn.Game, SessionConfig]:
    """Parse a session file and recover its configuration.

    Args:
        path: Path to a PGN file written by pinata.

    Returns:
        Tuple of (game, session config).

    Raises:
        SessionIOError: If the path is empty or the file cannot be read.
        PGNParseError: If the file holds no PGN game or malformed move text.
        GameInitError: If the moves cannot be replayed from the start position
            or the recorded result is not a PGN result.
        ProvenanceError: If the file was not written by pinata or its
            White/Black tags do not identify exactly one human side.
    """
    if not path:
        raise SessionIOError("No file name given.")

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PGNParseError(f"{path} is not a valid PGN file.", path) from e
    except OSError as e:
        raise SessionIOError(f"Unable to read {path}.", path) from e

    game = chess.pgn.read_game(io.StringIO(text))
    if game is None:
        raise PGNParseError(f"{path} is not a valid PGN file.", path)

    if game.errors:
        error = game.errors[0]
        logger.debug(f"PGN errors in {path}: {game.errors}")
        if isinstance(error, chess.InvalidMoveError):
            raise PGNParseError(f"{path} is not a valid PGN file.", path) from error
        raise GameInitError(f"Unable to initialize a new game from {path}.", path) from error

    try:
        game_outcome(game)
    except OutcomeInvariantError as e:
        raise GameInitError(
            f"Unable to initialize a new game from {path} (bad Result tag).", path
        ) from e

    annotator = get_tag(game, ANNOTATOR)
    if annotator != PROVENANCE_MARKER:
        raise ProvenanceError(f"{path} is not generated by Pinata.", path)

    try:
        config = decode_session(get_tag(game, WHITE), get_tag(game, BLACK))
    except ProvenanceError as e:
        raise ProvenanceError(f"{path} is not generated by Pinata ({e}).", path) from e

    logger.info(
        f"Loaded {path}: {len(list(game.mainline_moves()))} plies, "
        f"human plays {config.human_color_name}"
    )
    return game, config


def load_session(
    path: str | Path | None, console: Console | None = None
) -> tuple[chess.pgn.Game, SessionConfig] | None:
    """Resume a session from a file, reporting any failure on the console.

    Returns:
        Tuple of (game, session config), or None if the file could not be
        loaded.
    """
    out = get_console(console)
    try:
        game, config = read_session(path)
    except SessionError as e:
        logger.warning(f"Session load failed: {e}")
        out.print(f"[bold red]{escape(str(e))}[/bold red]")
        return None

    out.print(
        f"You are playing [bold yellow]{config.human_color_name}[/bold yellow] "
        f"against [bold yellow]{escape(config.engine_binary)}[/bold yellow]."
    )
    return game, config


def write_session(
    game: chess.pgn.Game,
    config: SessionConfig,
    path: str | Path,
    today: date | None = None,
) -> None:
    """Tag ``game`` with the session metadata and write it to ``path``.

    Any existing file is truncated. The file is closed on every exit path.

    Args:
        game: The game record. Its tags are updated in place.
        config: Session to record in the White/Black tags.
        path: Destination file.
        today: Date to record. Defaults to the current date.

    Raises:
        SessionIOError: If the file cannot be created or written.
        ValueError: If ``config`` cannot be encoded.
    """
    players = encode_session(config)
    path = Path(path)

    try:
        file = path.open("w", encoding="utf-8")
    except OSError as e:
        raise SessionIOError(f"Unable to create {path}.", path) from e

    with file:
        set_tag(game, ANNOTATOR, PROVENANCE_MARKER)
        set_tag(game, DATE, format_date(today or date.today()))
        outcome, _ = game_outcome(game)
        set_tag(game, RESULT, str(outcome))
        for key, value in players.items():
            set_tag(game, key, value)

        try:
            file.write(str(game) + "\n")
        except OSError as e:
            raise SessionIOError(f"Unable to save the game to {path}.", path) from e

    logger.info(f"Saved game to {path} (result {outcome})")


def save_session(
    game: chess.pgn.Game,
    config: SessionConfig,
    path: str | Path,
    console: Console | None = None,
) -> None:
    """Save a session, reporting failure on the console before re-raising.

    Raises:
        SessionIOError: If the file cannot be created or written.
    """
    try:
        write_session(game, config, path)
    except SessionIOError as e:
        logger.error(f"Session save failed: {e}")
        get_console(console).print(f"[bold red]{escape(str(e))}[/bold red]")
        raise

    get_console(console).print(f"Game saved to [bold]{escape(str(path))}[/bold].")
