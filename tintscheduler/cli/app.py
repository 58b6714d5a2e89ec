"""
Main CLI application using Typer.
"""

from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from ..config import AppConfig
from ..domain.exceptions import SchedulingError
from ..services.catalog_queries import CatalogService
from ..services.scheduling import SchedulingService, split_service_ids

app = typer.Typer(
    name="tintscheduler",
    help="Appointment slots, end times and technician availability for the tint shop",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml"),
]


def _load(config_file: Optional[Path]) -> tuple[AppConfig, SchedulingService, CatalogService]:
    """Load config and catalog, exiting with a readable error if either is broken."""
    try:
        config = AppConfig.load_or_default(config_file)
        catalog = config.load_catalog()
        scheduling = SchedulingService.from_config(config, catalog)
    except (FileNotFoundError, ValueError, SchedulingError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    return config, scheduling, CatalogService(catalog)


def _fail(error: SchedulingError) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")
    raise typer.Exit(1)


@app.command()
def slots(
    date: Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")],
    services: Annotated[Optional[str], typer.Option("--services", "-s", help="Comma-separated service ids")] = None,
    config_file: ConfigOption = None,
):
    """
    List the slots offered on a date for a selection of services.

    Examples:

        tintscheduler slots 2024-06-01 --services 1,2
    """
    _, scheduling, _ = _load(config_file)

    try:
        found = scheduling.available_slots(date, split_service_ids(services))
    except SchedulingError as e:
        _fail(e)

    table = Table(
        title=f"Available slots on {date}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", style="bold yellow")
    table.add_column("Duration (min)", justify="right")

    for slot in found:
        table.add_row(slot.start_time, str(slot.duration_minutes))

    console.print()
    console.print(table)
    console.print(f"[green]✓ {len(found)} slot(s)[/green]\n")


@app.command("end-time")
def end_time(
    start_date: Annotated[str, typer.Argument(help="Start date (YYYY-MM-DD)")],
    start_time: Annotated[str, typer.Argument(help="Start time (HH:MM)")],
    services: Annotated[str, typer.Option("--services", "-s", help="Comma-separated service ids")],
    config_file: ConfigOption = None,
):
    """
    Calculate when an appointment ends.
    """
    config, scheduling, _ = _load(config_file)

    try:
        estimate = scheduling.calculate_end_time(start_date, start_time, split_service_ids(services))
    except SchedulingError as e:
        _fail(e)

    console.print(Panel.fit(
        f"[bold]Start:[/bold]    {estimate.start.format('YYYY-MM-DD HH:mm')}\n"
        f"[bold]End:[/bold]      {estimate.end.format('YYYY-MM-DD HH:mm')}\n"
        f"[bold]Duration:[/bold] {estimate.duration_minutes} min ({config.timezone})",
        title="Estimated end time"
    ))


@app.command()
def availability(
    technician_id: Annotated[str, typer.Argument(help="Technician id")],
    start_date: Annotated[str, typer.Argument(help="Start date (YYYY-MM-DD)")],
    end_date: Annotated[str, typer.Argument(help="End date (YYYY-MM-DD), inclusive")],
    config_file: ConfigOption = None,
):
    """
    Show a technician's hourly availability between two dates.
    """
    _, scheduling, _ = _load(config_file)

    try:
        windows = scheduling.technician_availability(technician_id, start_date, end_date)
    except SchedulingError as e:
        _fail(e)

    if not windows:
        console.print("[yellow]⚠ No availability in this period.[/yellow]")
        return

    table = Table(
        title=f"Availability of {windows[0].technician_name}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Date", style="bold yellow")
    table.add_column("From")
    table.add_column("To")

    for window in windows:
        table.add_row(window.date, window.start_time, window.end_time)

    console.print()
    console.print(table)
    console.print()


@app.command()
def technicians(config_file: ConfigOption = None):
    """
    List all technicians in the roster.
    """
    _, _, catalog = _load(config_file)

    table = Table(title="Technicians", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold yellow")
    table.add_column("Specialties")

    for tech in catalog.list_technicians():
        table.add_row(tech.id, tech.name, ", ".join(tech.specialties))

    console.print()
    console.print(table)
    console.print()


@app.command("services")
def list_services(
    search: Annotated[Optional[str], typer.Option("--search", help="Filter by name or description")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Filter by tag")] = None,
    config_file: ConfigOption = None,
):
    """
    List individual services.
    """
    _, _, catalog = _load(config_file)

    table = Table(title="Services", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold yellow")
    table.add_column("Minutes", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Tags")

    for service in catalog.list_services(search, tag):
        table.add_row(
            service.id,
            service.name,
            str(service.estimated_time),
            f"{service.price:.2f}",
            ", ".join(service.tags),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def packages(
    search: Annotated[Optional[str], typer.Option("--search", help="Filter by name or description")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Filter by tag")] = None,
    config_file: ConfigOption = None,
):
    """
    List service packages and their included services.
    """
    _, _, catalog = _load(config_file)

    table = Table(title="Packages", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold yellow")
    table.add_column("Minutes", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Includes")

    for entry in catalog.list_packages(search, tag):
        package = entry["package"]
        table.add_row(
            package.id,
            package.name,
            str(package.estimated_time),
            f"{package.total_price:.2f}",
            ", ".join(s.name for s in entry["services"]),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port")] = 8000,
    config_file: ConfigOption = None,
):
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    from ..api.main import create_app

    try:
        config = AppConfig.load_or_default(config_file)
        api = create_app(config)
    except (FileNotFoundError, ValueError, SchedulingError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    uvicorn.run(api, host=host, port=port, log_level=config.log_level.lower())


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]tintscheduler[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
