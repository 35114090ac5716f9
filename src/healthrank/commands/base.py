"""Shared CLI utilities."""

import json
import logging
from datetime import date, datetime
from functools import wraps
from pathlib import Path

import click

from ..errors import HealthRankError
from ..models.profile import SubjectProfile
from ..models.readings import MetricReadings

LOGGER_NAME = "healthrank"

logger = logging.getLogger(LOGGER_NAME)

# Shared --today option; HEALTHRANK_TODAY pins the reference date for age derivation
today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    envvar="HEALTHRANK_TODAY",
    default=None,
    help="Reference date for age calculation (YYYY-MM-DD)",
)

format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the CLI logger."""
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return log


def handle_input_errors(f):
    """Decorator turning bad input into an error message and exit code 1."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        try:
            return f(*args, **kwargs)
        except HealthRankError as e:
            echo_error(str(e))
        except json.JSONDecodeError as e:
            echo_error(f"Invalid JSON: {e}")
        except KeyError as e:
            echo_error(f"Missing required field: {e.args[0]}")
        except (TypeError, ValueError) as e:
            echo_error(f"Invalid input: {e}")
        ctx.exit(1)

    return wrapper


def load_document(path: str | Path) -> dict:
    """Load a JSON input document."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    logger.debug("Loaded %s with keys %s", path, sorted(data))
    return data


def to_date(value: datetime | None) -> date | None:
    """Convert a click DateTime option value to a date."""
    return value.date() if value is not None else None


def parse_inputs(data: dict, today: date | None = None) -> tuple[SubjectProfile, MetricReadings]:
    """Split an input document into a profile and readings."""
    profile = SubjectProfile.from_dict(data, today=today)
    readings = MetricReadings.from_dict(data)
    logger.debug("Profile: %s", profile)
    logger.debug("Readings: %s", readings)
    return profile, readings


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)
