"""openapi-filter CLI tools."""

import importlib.metadata
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, cast

import typer
from rich.markup import escape

from openapi_filter.document import filter_document
from openapi_filter.exceptions import OpenAPIFilterError
from openapi_filter.loader import dump_document, load_document, read_selectors_file
from openapi_filter.report import console, report_result, report_selectors
from openapi_filter.settings import LOG_LEVEL, MatchMode, settings
from openapi_filter.utilities.logging import configure_logging, get_logger

logger = get_logger(__name__)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


app = typer.Typer(
    name="openapi-filter",
    help="Reduce an OpenAPI or Swagger document to selected paths and the schemas they use",
    add_completion=False,
    no_args_is_help=True,  # Show help if no args provided
)


@app.command()
def version() -> None:
    """Show the openapi-filter version."""
    try:
        version = importlib.metadata.version("openapi-filter")
        console.print(f"openapi-filter version {version}")
    except importlib.metadata.PackageNotFoundError:
        console.print("openapi-filter version unknown (package not installed)")
        sys.exit(1)


@app.command("filter")
def filter_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="OpenAPI or Swagger document (.json, .yaml or .yml)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_file: Annotated[
        Path,
        typer.Argument(
            help="Where to write the filtered document",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    selectors: Annotated[
        list[str] | None,
        typer.Argument(help="Paths to keep, or regular expressions with --regex"),
    ] = None,
    regex: Annotated[
        bool,
        typer.Option("--regex", help="Treat selectors as regular expressions"),
    ] = False,
    paths_file: Annotated[
        Path | None,
        typer.Option(
            "--paths-file",
            help="File with one selector per line ('#' starts a comment)",
            dir_okay=False,
        ),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option(help="Indentation of the written document", min=0),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Do not print the filtering report"),
    ] = False,
    log_level: Annotated[
        LogLevel | None,
        typer.Option(
            "--log-level",
            "-l",
            help="Log level",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Keep only the selected paths and every schema or definition they reference."""
    configure_logging(
        cast(LOG_LEVEL, log_level.value) if log_level else settings.log_level
    )
    mode: MatchMode = "regex" if regex else "exact"

    all_selectors = list(selectors or [])
    try:
        if paths_file is not None:
            all_selectors.extend(read_selectors_file(paths_file))
    except OpenAPIFilterError as e:
        logger.error(str(e))
        sys.exit(1)

    if not all_selectors:
        logger.error("No paths specified")
        sys.exit(1)

    try:
        document = load_document(input_file)
    except OpenAPIFilterError as e:
        logger.error(str(e))
        sys.exit(1)

    if not quiet:
        report_selectors(all_selectors, mode)

    result = filter_document(document, all_selectors, mode=mode)

    try:
        dump_document(
            result.document,
            output_file,
            indent=settings.indent if indent is None else indent,
        )
    except OpenAPIFilterError as e:
        logger.error(str(e))
        sys.exit(1)

    if not quiet:
        report_result(result)
        console.print(
            f"[green]Wrote filtered document to {escape(str(output_file))}[/green]"
        )


if __name__ == "__main__":
    app()
