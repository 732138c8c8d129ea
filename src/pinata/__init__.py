"""Pinata: a terminal chess client for playing against UCI engines.

Games are saved as PGN files that remember which side the human played and
which engine was on the other side, so a session can be resumed later:
- `from pinata.session import load_session, save_session`
- `from pinata.game import report_if_over, legal_moves`
"""

__version__ = "0.1.0"

from pinata.game import legal_moves, report_if_over
from pinata.session import SessionConfig, load_session, save_session

__all__ = [
    "SessionConfig",
    "__version__",
    "legal_moves",
    "load_session",
    "report_if_over",
    "save_session",
]
