"""Session configuration and its encoding in the White/Black tags.

A pinata PGN file records which side the human played by writing the
literal "Human" in that side's player tag. The other side's tag holds the
engine binary the human was playing against.
"""

from dataclasses import dataclass

import chess

from pinata.errors import ProvenanceError
from pinata.session.tags import BLACK, WHITE

PROVENANCE_MARKER = "pinata"
HUMAN_MARKER = "Human"
# python-chess fills missing player tags with the PGN "unknown" value.
UNKNOWN_PLAYER = "?"


@dataclass(frozen=True)
class SessionConfig:
    """Who sits on which side of the board."""

    human_is_black: bool
    engine_binary: str

    @property
    def human_color(self) -> chess.Color:
        return chess.BLACK if self.human_is_black else chess.WHITE

    @property
    def engine_color(self) -> chess.Color:
        return not self.human_color

    @property
    def human_color_name(self) -> str:
        return "Black" if self.human_is_black else "White"


def encode_session(config: SessionConfig) -> dict[str, str]:
    """Encode a session as White/Black tag values.

    Args:
        config: The session to encode.

    Returns:
        Mapping of tag name to value for the White and Black tags.

    Raises:
        ValueError: If the engine identifier is empty or equal to the human
            marker, since such a file could not be decoded again.
    """
    if config.engine_binary in ("", UNKNOWN_PLAYER):
        raise ValueError("Engine identifier must not be empty")
    if config.engine_binary == HUMAN_MARKER:
        raise ValueError(f"Engine identifier must not be {HUMAN_MARKER!r}")

    if config.human_is_black:
        return {WHITE: config.engine_binary, BLACK: HUMAN_MARKER}
    return {WHITE: HUMAN_MARKER, BLACK: config.engine_binary}


def decode_session(white: str, black: str) -> SessionConfig:
    """Decode White/Black tag values back into a session.

    Exactly one of the two values must be the human marker.

    Raises:
        ProvenanceError: If either tag is empty or unknown ("?"), or if
            both or neither of them name the human.
    """
    if white in ("", UNKNOWN_PLAYER) or black in ("", UNKNOWN_PLAYER):
        raise ProvenanceError("White and Black tags must both be set")

    white_is_human = white == HUMAN_MARKER
    black_is_human = black == HUMAN_MARKER
    if white_is_human and black_is_human:
        raise ProvenanceError("Both sides are marked as Human")
    if not white_is_human and not black_is_human:
        raise ProvenanceError("Neither side is marked as Human")

    if black_is_human:
        return SessionConfig(human_is_black=True, engine_binary=white)
    return SessionConfig(human_is_black=False, engine_binary=black)
