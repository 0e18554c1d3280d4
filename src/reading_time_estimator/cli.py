from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .config import EstimatorConfig, load_config
from .errors import EstimationError
from .estimation import estimate_from_file, estimate_parallel, read_text
from .models import EstimationResult

app = typer.Typer(help="Reading Time Estimator CLI.", no_args_is_help=True)


@app.command()
def estimate(
    text: str | None = typer.Option(None, "--text", "-t", help="Text to estimate."),
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="UTF-8 text file to estimate.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    reading_speed: float | None = typer.Option(
        None, "--reading-speed", help="Words per minute before adjustments."
    ),
    has_visuals: bool | None = typer.Option(
        None,
        "--has-visuals/--no-visuals",
        help="Add overhead for images and diagrams.",
    ),
    worker_count: int | None = typer.Option(
        None, "--worker-count", "-w", help="Number of syllable-counting workers."
    ),
    stream: bool | None = typer.Option(
        None,
        "--stream/--no-stream",
        help="Read --input-path line by line instead of loading it whole "
        "(not allowed with --text).",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Estimate reading time and readability, printing the result as JSON."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide exactly one of --text or --input-path.")

    if text is not None and stream:
        raise typer.BadParameter("--stream only applies to --input-path.")

    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _apply_overrides(cfg, reading_speed, has_visuals, worker_count, stream, log_level)
    _configure_logging(cfg.log_level)

    try:
        result = _run_estimation(cfg, text, input_path)
    except EstimationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(result.to_dict(), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EstimatorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _run_estimation(
    config: EstimatorConfig, text: str | None, input_path: Path | None
) -> EstimationResult:
    """Dispatch to the whole-text or streaming estimator."""
    if input_path is not None and config.streaming:
        return estimate_from_file(
            input_path, config.reading_speed, config.has_visuals, config.worker_count
        )
    if input_path is not None:
        text = read_text(input_path)
    return estimate_parallel(
        text or "", config.reading_speed, config.has_visuals, config.worker_count
    )


def _apply_overrides(
    config: EstimatorConfig,
    reading_speed: float | None,
    has_visuals: bool | None,
    worker_count: int | None,
    stream: bool | None,
    log_level: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if reading_speed is not None:
        config.reading_speed = reading_speed
    if has_visuals is not None:
        config.has_visuals = has_visuals
    if worker_count is not None:
        config.worker_count = worker_count
    if stream is not None:
        config.streaming = stream
    if log_level:
        config.log_level = log_level


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level {level_name!r}.")
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


if __name__ == "__main__":
    main()
