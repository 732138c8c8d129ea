"""Command-line interface for pinata."""

from pathlib import Path
from typing import Optional

import chess.engine
import typer
from loguru import logger
from rich.markup import escape

from pinata import __version__
from pinata.game import draw_board, legal_moves_line, report_if_over
from pinata.game.loop import GameLoop
from pinata.session import SessionConfig, load_session, new_game
from pinata.utils import console, load_config, setup_logging

app = typer.Typer(
    name="pinata",
    help="Pinata: play chess against a UCI engine in the terminal",
    add_completion=False,
)


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]Pinata[/bold blue] v{__version__}")


@app.command()
def play(
    engine: Optional[str] = typer.Option(
        None, "--engine", "-e", help="UCI engine binary to play against"
    ),
    black: Optional[bool] = typer.Option(
        None, "--black/--white", help="Side the human plays"
    ),
    load: Optional[Path] = typer.Option(
        None, "--load", "-l", help="Resume a game saved by pinata"
    ),
    blind: bool = typer.Option(False, "--blind", help="Play without board diagrams"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    overrides: Optional[list[str]] = typer.Argument(
        None, help="Setting overrides, e.g. movetime=2.5"
    ),
) -> None:
    """Start a new game, or resume one with --load."""
    try:
        cfg = load_config(config, overrides)
    except FileNotFoundError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    setup_logging("DEBUG" if verbose else cfg.log_level, cfg.log_file)

    loaded = load_session(load) if load is not None else None
    if loaded is not None:
        game, session = loaded
    else:
        if load is not None:
            console.print("Starting a new game instead.")
        session = SessionConfig(
            human_is_black=cfg.human_is_black if black is None else black,
            engine_binary=engine or cfg.engine,
        )
        try:
            game = new_game(session)
        except ValueError as e:
            console.print(f"[bold red]{escape(str(e))}.[/bold red]")
            raise typer.Exit(code=1) from e

    try:
        uci = chess.engine.SimpleEngine.popen_uci(session.engine_binary)
    except (OSError, chess.engine.EngineError) as e:
        logger.error(f"Failed to start engine {session.engine_binary}: {e}")
        console.print(
            f"[bold red]Unable to start engine "
            f"{escape(session.engine_binary)}.[/bold red]"
        )
        raise typer.Exit(code=1) from e

    with uci:
        GameLoop(
            game,
            session,
            uci,
            movetime=cfg.movetime,
            visual=cfg.visual and not blind,
            autosave=cfg.autosave,
            console=console,
        ).run()


@app.command()
def show(
    file: Path = typer.Argument(..., help="PGN file saved by pinata"),
) -> None:
    """Show the position, legal moves and result of a saved game."""
    loaded = load_session(file)
    if loaded is None:
        raise typer.Exit(code=1)

    game, session = loaded
    board = game.end().board()
    draw_board(board, session.human_is_black)
    if not report_if_over(game):
        turn = "White" if board.turn else "Black"
        console.print(f"{turn} to move: {legal_moves_line(board)}")


if __name__ == "__main__":
    app()
