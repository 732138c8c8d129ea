"""Error kinds raised while loading and saving game sessions.

Everything deriving from SessionError is recoverable: the load/save
boundary reports it to the user and carries on. OutcomeInvariantError is
the one unrecoverable condition and is deliberately not a SessionError.
"""

from pathlib import Path


class SessionError(Exception):
    """Base exception for session load/save failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path else None


class SessionIOError(SessionError):
    """Raised when a session file cannot be read, created, or written."""

    pass


class PGNParseError(SessionError):
    """Raised when a file does not contain well-formed PGN."""

    pass


class GameInitError(SessionError):
    """Raised when parsed PGN cannot seed a playable game (e.g. illegal moves)."""

    pass


class ProvenanceError(SessionError):
    """Raised when a file was not produced by pinata or lacks player tags."""

    pass


class OutcomeInvariantError(RuntimeError):
    """Raised when python-chess reports a result outside the four known outcomes."""

    def __init__(self, result: object) -> None:
        super().__init__(f"Unknown game result: {result!r}")
        self.result = result
