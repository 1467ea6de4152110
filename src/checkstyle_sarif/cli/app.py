# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from checkstyle_sarif import __version__
from checkstyle_sarif.cli.exit_codes import ExitCode
from checkstyle_sarif.core.config import Settings, get_settings
from checkstyle_sarif.core.exceptions import (
    CheckstyleSarifError,
    ConfigurationError,
    InputError,
    OutputError,
)
from checkstyle_sarif.core.logging import setup_logging

logger = logging.getLogger("checkstyle_sarif.cli")

app = typer.Typer(
    name="checkstyle-to-sarif",
    help="checkstyle-to-sarif: convert Checkstyle XML reports to SARIF 2.1.0",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"checkstyle-to-sarif v{__version__}")
        raise typer.Exit()


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def _read_input(input_path: Path | None) -> str:
    if input_path is not None:
        try:
            return input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Cannot read input file: {exc}") from exc

    if sys.stdin is None or sys.stdin.isatty():
        raise InputError("No input provided: pass --input or pipe Checkstyle XML on stdin")
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read standard input: {exc}") from exc


def _write_output(text: str, output: Path | None) -> None:
    if output:
        try:
            output.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Cannot write output file: {exc}") from exc
        typer.echo(f"SARIF written to {output}", err=True)
    else:
        sys.stdout.write(text + "\n")


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(int(ExitCode.FAILURE))


@app.command()
def convert(
    input_path: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Checkstyle XML file (default: read stdin)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SARIF output file (default: write stdout)"),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option("--indent", min=0, help="JSON indentation width, 0 for compact"),
    ] = None,
    tool_version: Annotated[
        str | None,
        typer.Option("--tool-version", help="Override tool.driver.version"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging on stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version information and exit",
        ),
    ] = False,
) -> None:
    """Convert a Checkstyle XML report to SARIF 2.1.0 JSON."""
    from checkstyle_sarif.sdk import convert_checkstyle_to_sarif

    try:
        settings = _load_settings()
    except ConfigurationError as exc:
        raise _fail(str(exc)) from exc

    setup_logging(level="DEBUG" if verbose else settings.log_level, fmt=settings.log_format)

    try:
        xml_content = _read_input(input_path)
    except InputError as exc:
        raise _fail(str(exc)) from exc

    try:
        sarif = convert_checkstyle_to_sarif(
            xml_content,
            indent=settings.indent if indent is None else indent,
            tool_version=tool_version or settings.tool_version or None,
        )
    except CheckstyleSarifError as exc:
        logger.debug("Conversion failed", exc_info=True)
        raise _fail(f"Conversion failed: {exc}") from exc

    try:
        _write_output(sarif, output)
    except OutputError as exc:
        raise _fail(str(exc)) from exc


def main() -> None:
    app()
