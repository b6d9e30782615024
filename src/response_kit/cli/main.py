"""CLI for response-kit: preview how data renders as an HTTP response."""

from __future__ import annotations

import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from response_kit.core.config import AppSettings
from response_kit.exceptions import ResponseKitError
from response_kit.response import ResponseBuilder
from response_kit.sinks.memory_sink import BufferedOutputSink

app = typer.Typer(name="response-kit", help="Format-aware HTTP response builder")
console = Console()


@app.callback()
def main() -> None:
    """Format-aware HTTP response builder."""


def _parse_content_types(pairs: List[str]) -> dict[str, str]:
    """Parse ``FORMAT=MIME`` pairs into a content-type table."""
    table: dict[str, str] = {}
    for pair in pairs:
        response_format, sep, mime = pair.partition("=")
        if not sep or not response_format or not mime:
            raise typer.BadParameter(f"Expected FORMAT=MIME, got '{pair}'")
        table[response_format] = mime
    return table


def _load_data(data: str, raw: bool) -> object:
    """Decode *data* as JSON unless *raw*; non-JSON text stays a string."""
    if raw:
        return data
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        return data


@app.command()
def render(
    data: str = typer.Argument(..., help="Response data (JSON text, or a plain string)"),
    response_format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format"),
    status: Optional[int] = typer.Option(None, "--status", "-s", help="HTTP status code"),
    reason: Optional[str] = typer.Option(None, "--reason", help="Status reason phrase"),
    content_type: List[str] = typer.Option([], "--content-type", "-c", help="Extra FORMAT=MIME mapping"),
    raw: bool = typer.Option(False, "--raw", help="Do not decode DATA as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render DATA through a ResponseBuilder and print the result."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    settings = AppSettings()
    response = ResponseBuilder.from_settings(
        BufferedOutputSink(charset=settings.response.charset), settings.response
    )
    response.content_types.update(_parse_content_types(content_type))

    try:
        if status is not None:
            response.set_status_code(status, reason)
        response.set_format(response_format or settings.response.default_format)
        sent = response.set_data(_load_data(data, raw)).send()
    except ResponseKitError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]{sent.status_line}[/bold]")

    table = Table(title="Headers")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for name, value in sent.headers.items():
        table.add_row(name, value)
    console.print(table)

    console.print(sent.body, markup=False, highlight=False)


if __name__ == "__main__":
    app()
