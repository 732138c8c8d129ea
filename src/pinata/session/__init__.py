"""Session persistence: PGN files that remember who was playing."""

from pinata.session.config import (
    HUMAN_MARKER,
    PROVENANCE_MARKER,
    SessionConfig,
    decode_session,
    encode_session,
)
from pinata.session.store import (
    load_session,
    new_game,
    read_session,
    save_session,
    write_session,
)
from pinata.session.tags import get_tag, set_tag

__all__ = [
    "HUMAN_MARKER",
    "PROVENANCE_MARKER",
    "SessionConfig",
    "decode_session",
    "encode_session",
    "get_tag",
    "load_session",
    "new_game",
    "read_session",
    "save_session",
    "set_tag",
    "write_session",
]
