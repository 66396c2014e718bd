"""
fitfam env - Display environment constants.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(name="env", help="Show app environment constants", invoke_without_command=True)

console = Console()


@app.callback()
def env(
    ctx: typer.Context,
    project_dir: Path = typer.Option(Path.cwd(), "--project-dir", "-d", help="Project directory"),
) -> None:
    """
    List the read-only environment constants for the project's bundle.
    """
    if ctx.invoked_subcommand is None:
        from fitfam.config.environment import AppEnvironment
        from fitfam.config.loader import load_settings
        from fitfam.config.sources import ResourceBundle
        from fitfam.exceptions import ConfigurationError

        try:
            settings = load_settings(project_dir)
        except ConfigurationError as e:
            console.print(f"[red]Error:[/red] {escape(e.message)}")
            raise typer.Exit(1)

        bundle = ResourceBundle(settings.bundle_path(project_dir))
        environment = AppEnvironment(bundle_identifier=bundle.bundle_identifier)

        table = Table(title="Environment", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Value", style="green")
        for name, value in environment.to_dict().items():
            table.add_row(name, str(value))
        console.print(table)
