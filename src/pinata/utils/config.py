"""Configuration loading utilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from omegaconf import DictConfig, OmegaConf


@dataclass
class PinataConfig:
    """Settings for an interactive session."""

    engine: str = "stockfish"  # Engine binary, name or path
    human_is_black: bool = False
    visual: bool = True  # False plays blind (no board diagrams)
    movetime: float = 1.0  # Seconds the engine may think per move
    autosave: str = "pinata.pgn"  # Written when the session ends
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def load_config(
    config_path: str | Path | None = None, overrides: list[str] | None = None
) -> DictConfig:
    """Load settings, merged over the PinataConfig defaults.

    Args:
        config_path: Optional path to a YAML configuration file.
        overrides: Optional list of CLI-style overrides (e.g., ["movetime=2.5"]).

    Returns:
        Merged configuration as a DictConfig.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
    """
    config = OmegaConf.structured(PinataConfig)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)
        config = OmegaConf.merge(config, OmegaConf.load(config_path))

    if overrides:
        override_conf = OmegaConf.from_dotlist(overrides)
        config = OmegaConf.merge(config, override_conf)

    return config

