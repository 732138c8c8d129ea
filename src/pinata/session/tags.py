"""Read and write PGN tag pairs on a game record."""

import chess.pgn
from loguru import logger

ANNOTATOR = "Annotator"
WHITE = "White"
BLACK = "Black"
DATE = "Date"
RESULT = "Result"


def get_tag(game: chess.pgn.Game | None, key: str) -> str:
    """Look up a tag pair.

    Args:
        game: The game record, or None.
        key: Tag name, e.g. "White".

    Returns:
        The tag value, or an empty string if the game is None or the tag
        is absent.
    """
    if game is None:
        return ""
    return game.headers.get(key, "")


def set_tag(game: chess.pgn.Game, key: str, value: str) -> None:
    """Insert or overwrite a tag pair."""
    logger.debug(f"Tag {key} = {value!r}")
    game.headers[key] = value
