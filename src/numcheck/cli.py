from __future__ import annotations

import json
import logging
import pathlib
import sys
from types import ModuleType
from typing import List, Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from .config import NumcheckConfig, load_config
from .engine.pipeline import Pipeline
from .exceptions import ConfigError, InvalidFormat, UnknownValidator
from .registry import available, get_validator

console = Console()
err_console = Console(stderr=True)
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="numcheck: validate and format identifier numbers")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"numcheck {__version__}")
        raise typer.Exit()


def _configure_logging(cfg: NumcheckConfig, verbose: bool) -> None:
    """Route both structlog events and the library's stdlib records to stderr in one format."""
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level)
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.logging.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    lib_logger = logging.getLogger("numcheck")
    lib_logger.handlers = [handler]
    lib_logger.setLevel(level)


def _resolve(cfg: NumcheckConfig, number_type: Optional[str]) -> ModuleType:
    name = number_type or cfg.default_type
    try:
        return get_validator(name)
    except UnknownValidator:
        raise typer.BadParameter(
            f"unknown type {name!r} (available: {', '.join(available())})", param_hint="--type"
        ) from None


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to numcheck.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)
    _configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def validate(
    ctx: typer.Context,
    numbers: List[str] = typer.Argument(..., help="Numbers to validate"),
    number_type: Optional[str] = typer.Option(None, "--type", "-t", help="Number type, e.g. th.idnr"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
):
    """Check numbers for length, format and check digit."""
    mod = _resolve(ctx.obj["config"], number_type)
    results = [(n, mod.validate(n)) for n in numbers]
    invalid = sum(1 for _, r in results if not r.is_valid)
    log.info("validate", type=mod.ABBREVIATION, count=len(results), invalid=invalid)

    if as_json:
        typer.echo(json.dumps([{"number": n, **r.to_dict()} for n, r in results], ensure_ascii=False))
    else:
        for n, r in results:
            if r.is_valid:
                console.print(f"{escape(n)}: [green]valid[/green] ({r.compact})")
            else:
                console.print(f"{escape(n)}: [red]{r.error_kind.value}[/red]")

    if invalid:
        raise typer.Exit(code=1)


@app.command()
def compact(
    ctx: typer.Context,
    numbers: List[str] = typer.Argument(..., help="Numbers to compact"),
    number_type: Optional[str] = typer.Option(None, "--type", "-t", help="Number type, e.g. th.idnr"),
):
    """Strip separators and print the compact form."""
    mod = _resolve(ctx.obj["config"], number_type)
    failed = False
    for n in numbers:
        try:
            typer.echo(mod.compact(n))
        except InvalidFormat as e:
            failed = True
            err_console.print(f"[red]{e.kind.value}[/red]: {escape(e.message)}")
    if failed:
        raise typer.Exit(code=2)


@app.command("format")
def format_(
    ctx: typer.Context,
    numbers: List[str] = typer.Argument(..., help="Numbers to format"),
    number_type: Optional[str] = typer.Option(None, "--type", "-t", help="Number type, e.g. th.idnr"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Fail on unsafe characters"),
):
    """Print numbers in their grouped display form."""
    cfg: NumcheckConfig = ctx.obj["config"]
    mod = _resolve(cfg, number_type)
    strict = cfg.format.strict if strict is None else strict
    try:
        for n in numbers:
            typer.echo(mod.format(n, strict=strict, separator=cfg.format.separator))
    except InvalidFormat as e:
        err_console.print(f"[red]{e.kind.value}[/red]: {escape(e.message)}")
        raise typer.Exit(code=2)


@app.command()
def scan(
    ctx: typer.Context,
    text: Optional[List[str]] = typer.Argument(None, help="Text to scan, joined with spaces (default: stdin)"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
):
    """Find valid identifier numbers inside free text."""
    source = " ".join(text) if text else sys.stdin.read()
    pipeline = Pipeline(ctx.obj["config"])
    spans = pipeline.scan_text(source)
    log.info("scan", spans=len(spans))

    if as_json:
        typer.echo(json.dumps([
            {"start": s.start, "end": s.end, "text": s.text, "type": s.type, "compact": s.compact}
            for s in spans
        ]))
        return
    for s in spans:
        console.print(f"{s.start}-{s.end}\t{s.type}\t{escape(s.text)}")
    console.print(f"{len(spans)} identifier(s) found")
