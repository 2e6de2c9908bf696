from dataclasses import replace
from pathlib import Path
from typing import NoReturn

import orjson
import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reclayout.config import SUPPORTED_FORMATS, LayoutConfig, load_config, sample_config
from reclayout.errors import LayoutError
from reclayout.layout.export import layout_to_json, write_arrow, write_csv
from reclayout.layout.render import render_report
from reclayout.log import configure_logging
from reclayout.pipeline import compute_layout, generate_layout
from reclayout.samples import list_samples, load_sample

app = typer.Typer(help="Generate byte-offset record layouts from copybooks.")
samples_app = typer.Typer(help="Browse and run the bundled sample copybooks.")
console = Console()

app.add_typer(samples_app, name="samples")


def _read_text(path: Path, encoding: str) -> str:
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {path}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid {encoding}: {exc.reason}") from exc


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True, end="")


def _fail(exc: LayoutError) -> NoReturn:
    console.print(f"[bold red]ERROR:[/] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _resolve_config(config_path: Path | None, fmt: str | None, strict: bool) -> LayoutConfig:
    try:
        cfg = load_config(config_path) if config_path else LayoutConfig()
        if fmt:
            cfg = replace(cfg, output_format=fmt)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if strict:
        cfg = replace(cfg, strict=True)
    return cfg


@app.command()
def layout(
    input: Path = typer.Argument(..., help="Copybook / data structure file (.cpy, .DS, .FD)."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Where to write the result (default: next to the input)."
    ),
    format: str | None = typer.Option(
        None, "--format", "-f", help=f"Output format: {' | '.join(SUPPORTED_FORMATS)}."
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print instead of writing a file."),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on content lines that are not field declarations."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Optional YAML/JSON config file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    """Compute field lengths and positions and write the record layout."""
    configure_logging(verbose)
    cfg = _resolve_config(config, format, strict)
    text = _read_text(input, cfg.encoding)
    fmt = cfg.output_format

    if stdout and fmt in ("csv", "arrow"):
        raise typer.BadParameter(f"{fmt} output needs a file; drop --stdout.")

    try:
        result = compute_layout(text, cfg)
    except LayoutError as exc:
        _fail(exc)

    if stdout:
        if fmt == "json":
            _emit(layout_to_json(result).decode() + "\n")
        else:
            _emit(render_report(result))
        return

    target = output or input.with_suffix(cfg.suffix_for(fmt))
    if fmt == "json":
        target.write_bytes(layout_to_json(result))
    elif fmt == "csv":
        write_csv(result, target)
    elif fmt == "arrow":
        write_arrow(result, target)
    else:
        target.write_text(render_report(result), encoding=cfg.encoding)
    console.print(f"[bold green]Record layout written[/] to {target}")


@app.command("config")
def show_config() -> None:
    """Print the default configuration as YAML."""
    _emit(yaml.safe_dump(sample_config(), sort_keys=False))


@samples_app.command("list")
def samples_list() -> None:
    """List the bundled sample copybooks."""
    table = Table(title="Sample copybooks")
    table.add_column("Name")
    table.add_column("Description")
    for sample in list_samples():
        table.add_row(sample.name, sample.description)
    console.print(table)


def _sample_text(name: str) -> str:
    try:
        return load_sample(name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc


@samples_app.command("show")
def samples_show(name: str = typer.Argument(..., help="Sample name, e.g. DINC.")) -> None:
    """Print a sample copybook."""
    _emit(_sample_text(name))


@samples_app.command("layout")
def samples_layout(
    name: str = typer.Argument(..., help="Sample name, e.g. DINC."),
    json_output: bool = typer.Option(False, "--json", help="Emit rows as JSON."),
) -> None:
    """Run the generator on a sample and print the result."""
    text = _sample_text(name)
    try:
        if json_output:
            _emit(layout_to_json(compute_layout(text)).decode() + "\n")
        else:
            _emit(generate_layout(text))
    except LayoutError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
