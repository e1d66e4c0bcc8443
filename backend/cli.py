"""
Retail Catalog CLI.

Command-line interface for common operations:
    catalog db-init          Create the tables
    catalog serve            Run the API with uvicorn
    catalog tables [NAME]    Show the admin table declarations
    catalog health           Query a running API's detailed health check
    catalog version          Show version information
"""

import sys
import time

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="catalog",
    help="Retail Catalog API management CLI",
    add_completion=False,
)
console = Console()

API_VERSION = "0.1.0"


# =============================================================================
# Database Commands
# =============================================================================

@app.command()
def db_init(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
):
    """Create database tables (no migrations, create_all only)."""
    from sqlalchemy.exc import SQLAlchemyError

    from rest_api.models import Base
    from shared.infrastructure.db import engine

    console.print(f"[blue]Initializing database: {engine.url.render_as_string(hide_password=True)}[/blue]")

    try:
        if drop:
            Base.metadata.drop_all(bind=engine)
            console.print("[yellow]Dropped existing tables[/yellow]")
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        console.print(f"[red]✗ Database initialization failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Tables ready: {', '.join(sorted(Base.metadata.tables))}[/green]")


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(None, help="Port (defaults to REST_API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """Run the REST API with uvicorn."""
    import uvicorn

    from shared.config.settings import settings

    port = port or settings.rest_api_port
    console.print(f"[blue]Starting REST API on {host}:{port}[/blue]")
    uvicorn.run("rest_api.main:app", host=host, port=port, reload=reload)


# =============================================================================
# Admin Table Commands
# =============================================================================

@app.command()
def tables(
    name: str = typer.Argument(None, help="Table to describe (omit to list all)"),
):
    """Show the admin grid/form declarations."""
    from rest_api.services.admin_tables import get_admin_table, list_admin_tables

    if name is None:
        table = Table(title="Admin Tables")
        table.add_column("Name", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Columns", style="yellow")
        for table_name in list_admin_tables():
            declaration = get_admin_table(table_name)
            table.add_row(table_name, declaration.title, str(len(declaration.info_fields)))
        console.print(table)
        return

    declaration = get_admin_table(name)
    if declaration is None:
        console.print(f"[red]✗ Unknown admin table: {name}[/red]")
        raise typer.Exit(1)

    grid = Table(title=f"{declaration.title} (grid)")
    grid.add_column("Label", style="cyan")
    grid.add_column("Column")
    grid.add_column("Sortable")
    grid.add_column("Filter")
    grid.add_column("Width")
    grid.add_column("Display")
    for info in declaration.info_fields:
        grid.add_row(
            info.label,
            info.column,
            "yes" if info.sortable else "",
            info.filter or "",
            str(info.width or ""),
            info.display or "",
        )
    console.print(grid)

    form = Table(title=f"{declaration.form_title} (form)")
    form.add_column("Label", style="cyan")
    form.add_column("Type")
    form.add_column("Required")
    form.add_column("Placeholder")
    form.add_column("Help")
    for field in declaration.form_fields:
        form.add_row(
            field.label,
            field.form_type,
            "yes" if field.required else "",
            field.placeholder or "",
            field.help or "",
        )
    console.print(form)


# =============================================================================
# Health Commands
# =============================================================================

@app.command()
def health(
    url: str = typer.Option("http://localhost:8000", help="Base URL of the running API"),
):
    """Check a running API's dependencies."""
    import httpx

    table = Table(title="Service Health")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Response Time", style="yellow")

    start = time.perf_counter()
    try:
        response = httpx.get(f"{url.rstrip('/')}/health/detailed", timeout=5.0)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ API unreachable: {type(e).__name__}[/red]")
        raise typer.Exit(1)
    elapsed = (time.perf_counter() - start) * 1000

    body = response.json()
    table.add_row("REST API", body.get("status", str(response.status_code)), f"{elapsed:.0f}ms")
    for component, result in body.get("dependencies", {}).items():
        latency = result.get("latency_ms")
        table.add_row(component, result.get("status", "?"), f"{latency:.0f}ms" if latency is not None else "-")

    console.print(table)
    if response.status_code != 200:
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    table = Table(title="Retail Catalog Version")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")

    table.add_row("API", API_VERSION)
    table.add_row("Python", sys.version.split()[0])

    console.print(table)


if __name__ == "__main__":
    app()
