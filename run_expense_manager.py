"""Mini README: Entry point CLI for the expense manager.

This script exposes a Typer CLI with two commands: ``run`` starts the FastAPI
service through uvicorn using host, port, and log level drawn from the
environment unless overridden, and ``show-calendar`` prints the Sunday-first
month grid for a ``YYYY-MM`` month straight to the terminal.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer
import uvicorn

from expense_manager.calendar_grid import WEEKDAY_LABELS, CalendarMonth, calendar_days
from expense_manager.configuration import get_settings
from expense_manager.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the expense manager service and inspect calendars.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: bind-all sentinels.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting expense manager on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}/calendar"
    )
    uvicorn.run(
        "expense_manager.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command("show-calendar")
def show_calendar(
    month: Optional[str] = typer.Argument(None, help="Month as YYYY-MM, defaults to today."),
) -> None:
    """Print the calendar grid, bracketing days outside the month."""

    time_reference = get_settings().time_reference
    try:
        if month:
            reference = CalendarMonth.parse(month)
        else:
            reference = CalendarMonth.from_date(datetime.now(time_reference), time_reference)
        days = calendar_days(reference, time_reference)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error

    typer.echo(reference.label)
    typer.echo(" ".join(f"{label:>4}" for label in WEEKDAY_LABELS))
    for start in range(0, len(days), 7):
        row = []
        for day in days[start : start + 7]:
            text = str(day.day) if reference.contains(day) else f"({day.day})"
            row.append(f"{text:>4}")
        typer.echo(" ".join(row))


if __name__ == "__main__":
    cli()
