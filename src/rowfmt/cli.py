"""Click CLI wiring and entry points for rowfmt."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from .config_loader import ConfigError, load_config
from .datatypes import AppConfig
from .errors import RowFormatError
from .inspection import template_table
from .row import make_row
from .template import parse_template

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_data(data: Optional[str], data_file: Optional[Path], assignments: tuple[str, ...]) -> Dict[str, Any]:
    """Merge JSON data (inline or from a file) with ``key=value`` overrides."""

    if data is not None and data_file is not None:
        raise click.ClickException("Cannot combine --data with --data-file.")
    raw: Any = {}
    try:
        if data is not None:
            raw = json.loads(data)
        elif data_file is not None:
            raw = json.loads(data_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Data is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Unable to read data file: {exc}") from exc
    if not isinstance(raw, dict):
        raise click.ClickException("Data must be a JSON object mapping field names to values.")
    merged: Dict[str, Any] = dict(raw)
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise click.ClickException(f"Expected key=value, got {assignment!r}.")
        merged[key] = value
    return merged


def _resolve_width(width: Optional[int], config: AppConfig, console: Console) -> int:
    if width is not None:
        return width
    if config.cli.width is not None:
        return config.cli.width
    return console.width


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="TOML file with [layout], [render] and [cli] settings.")
@click.option("--verbose", is_flag=True, help="Show debug logging on stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """Render data-driven rows of fixed-width text from @field templates."""

    _configure_logging(verbose)
    config = AppConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            raise click.ClickException(f"Config error: {exc}") from exc
    ctx.obj = config


@main.command("inspect")
@click.argument("template_source", metavar="TEMPLATE")
@click.option("--width", type=click.IntRange(min=0), default=None, help="Also show widths allocated for this row width.")
@click.pass_obj
def inspect_command(config: AppConfig, template_source: str, width: Optional[int]) -> None:
    """Print the nodes a template parses into."""

    console = Console()
    try:
        template = parse_template(template_source)
        widths = None
        if width is not None:
            widths = make_row(template, width, config=config).widths
    except RowFormatError as exc:
        raise click.ClickException(str(exc)) from exc
    console.print(template_table(template, widths))


@main.command("render")
@click.argument("template_source", metavar="TEMPLATE")
@click.option("--width", type=click.IntRange(min=0), default=None, help="Row width; defaults to [cli].width or the terminal width.")
@click.option("--data", default=None, help="JSON object with field values.")
@click.option("--data-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="File containing a JSON object with field values.")
@click.option("--set", "assignments", multiple=True, metavar="KEY=VALUE", help="Set a field value; may be repeated.")
@click.option("--frame/--no-frame", default=None, help="Surround each line with | markers.")
@click.pass_obj
def render_command(
    config: AppConfig,
    template_source: str,
    width: Optional[int],
    data: Optional[str],
    data_file: Optional[Path],
    assignments: tuple[str, ...],
    frame: Optional[bool],
) -> None:
    """Render one row of TEMPLATE with the given data."""

    values = _load_data(data, data_file, assignments)
    row_width = _resolve_width(width, config, Console())
    try:
        template = parse_template(template_source)
        row = make_row(template, row_width, config=config)
        lines = row.render(values)
    except RowFormatError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug("Row widths: %s", list(row.widths))
    use_frame = config.cli.frame if frame is None else frame
    for line in lines:
        click.echo(f"|{line}|" if use_frame else line)


__all__ = ["main"]
