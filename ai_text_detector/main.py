"""Entry point to the application as a Typer CLI."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from ai_text_detector.configuration import config
from ai_text_detector.detection.detector import AITextDetector
from ai_text_detector.detection.scoring import get_scoring_strategy
from ai_text_detector.exceptions import DetectionError

app = Typer(no_args_is_help=True)

FileArgument = Annotated[
    Path | None,
    typer.Argument(help="File with the text. Read from stdin if omitted."),
]
StrategyOption = Annotated[
    str, typer.Option("--strategy", "-s", help="Name of the scoring strategy.")
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log every stage of the analysis.")
]


def _configure_logging(*, verbose: bool) -> None:
    logger.remove()
    logger.enable("ai_text_detector")
    logger.add(sys.stderr, level="DEBUG" if verbose else config.log_level)


def _read_text(file: Path | None) -> str:
    if file is None:
        return sys.stdin.read()
    return file.read_text()


def _build_detector(strategy: str) -> AITextDetector:
    try:
        return AITextDetector(strategy=get_scoring_strategy(strategy))
    except DetectionError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e


@app.command("detect")
def detect(
    file: FileArgument = None,
    strategy: StrategyOption = config.scoring_strategy,
    verbose: VerboseOption = False,
) -> None:
    """Decide whether a text was written by AI."""
    _configure_logging(verbose=verbose)
    detector = _build_detector(strategy)
    try:
        result = detector.detect_ai_text(_read_text(file))
    except DetectionError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(f"Detector: {detector.get_name()}\n{result}")


@app.command("metrics")
def metrics(
    file: FileArgument = None,
    verbose: VerboseOption = False,
) -> None:
    """Print every metric of a text as JSON."""
    _configure_logging(verbose=verbose)
    detector = AITextDetector()
    try:
        analysis = detector.analyse_text(_read_text(file))
    except DetectionError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(analysis.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
