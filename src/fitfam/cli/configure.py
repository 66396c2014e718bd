"""
fitfam configure - Run startup configuration resolution.

Resolves the backend configuration from the project's resource bundle and reports
the outcome. Every outcome is non-fatal, so the command exits 0 unless the
settings themselves cannot be loaded.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(name="configure", help="Resolve backend configuration", invoke_without_command=True)

console = Console()


@app.callback()
def configure(
    ctx: typer.Context,
    env: str | None = typer.Option(None, help="Environment"),
    project_dir: Path = typer.Option(Path.cwd(), "--project-dir", "-d", help="Project directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show resolution diagnostics"),
) -> None:
    """
    Resolve the backend and sign-in configuration and show the result.
    """
    if ctx.invoked_subcommand is not None:
        return

    from fitfam.config.resolver import Configured, DemoMode
    from fitfam.core.initialization import initialize
    from fitfam.exceptions import InitializationError
    from fitfam.utils.logging import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING", console=console)

    try:
        context = initialize(project_dir, env=env, configure_logging=False)
    except InitializationError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    result = context.result
    if isinstance(result, Configured):
        console.print(f"[green]Configured[/green] from [cyan]{result.source_name}[/cyan] ({escape(str(result.path))})")
    elif isinstance(result, DemoMode):
        console.print(f"[yellow]Demo mode[/yellow]: {escape(result.reason)}")
    else:
        console.print(f"[red]Partial failure[/red] at [bold]{result.stage}[/bold]: {escape(result.reason)}")

    table = Table(title="Auth capability", show_header=True)
    table.add_column("Capability", style="cyan")
    table.add_column("Available", style="green")
    table.add_row("Backend", "yes" if context.auth.backend_available else "no")
    table.add_row("Sign-in", "yes" if context.auth.sign_in_available else "no")
    table.add_row("Identity provider", context.identity_status.value)
    console.print(table)

    if context.auth.reason:
        console.print(f"[dim]{escape(context.auth.reason)}[/dim]")
