from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import typer
import yaml

app = typer.Typer(name="uno", help="Check a call against an expected result")


def resolve(path: str) -> Any:
    """Import ``package.module.attr`` or ``package.module:attr.sub``."""
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
        obj = importlib.import_module(module_name)
        for part in attr_path.split("."):
            obj = getattr(obj, part)
        return obj

    parts = path.split(".")
    for i in range(len(parts), 0, -1):
        try:
            obj = importlib.import_module(".".join(parts[:i]))
        except ImportError:
            continue
        for part in parts[i:]:
            obj = getattr(obj, part)
        return obj
    raise ValueError(f"Cannot import '{path}'")


def _literal(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid literal {text!r}: {e}") from e


@app.command()
def check(
    target: str = typer.Argument(help="Dotted path of the callable, e.g. math.floor"),
    args: str = typer.Argument(help="YAML list of arguments, e.g. '[1.5]'"),
    expected: str = typer.Argument(help="YAML literal of the expected result"),
    name: str | None = typer.Option(None, help="Display name template"),
    receiver: str | None = typer.Option(
        None, help="Dotted path of the object to call the target on"
    ),
    count: int | None = typer.Option(None, help="Repeat count (accepted, not used)"),
    settings: str | None = typer.Option(None, help="Path to settings YAML"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report here"),
    debug_log: str | None = typer.Option(None, help="Append debug output to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run a single check and exit non-zero if it fails."""
    from uno.config import Settings, load_settings
    from uno.evaluator import Uno
    from uno.reporting import JUnitReporter
    from uno.verbose import setup_logger

    try:
        eval_settings = load_settings(Path(settings)) if settings else Settings()
        logger = setup_logger(
            Path(debug_log) if debug_log else None,
            verbose=verbose or eval_settings.verbose,
        )
        reporter = JUnitReporter(suite_name=eval_settings.group)
        uno = Uno(settings=eval_settings, reporters=[reporter], logger=logger)
        verdict = uno.check(
            resolve(target),
            _literal(args),
            _literal(expected),
            name=name,
            receiver=resolve(receiver) if receiver else None,
            count=count,
        )
    except (ValueError, ImportError, AttributeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    typer.echo(verdict.message.rstrip("\n"), err=not verdict.passed)

    if junit:
        report_path = reporter.write(Path(junit))
        typer.echo(f"Report: {report_path}")

    if not verdict.passed:
        raise typer.Exit(1)


@app.command()
def version():
    """Print the installed version."""
    from uno import __version__

    typer.echo(__version__)
