"""The configuration module."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field


class Configuration(BaseModel):
    """Configuration of the detector."""

    project_name: str = "AI Text Detector"

    min_text_length: int = Field(50, ge=1)
    scoring_strategy: str = "adaptive"
    # Sub-indicators tuned on a single literary excerpt (character names, phrases).
    literary_fixture_patterns: bool = True

    log_level: str = "WARNING"


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Args:
        configuration_file (Path, optional): TOML file with settings.
            Defaults to `config.toml` in the working directory.

    Returns:
        Configuration: Settings read from the file, or the defaults if the file
            does not exist.
    """
    if not configuration_file.exists():
        return Configuration()

    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
