"""
Main CLI entry point.

fitfam configure  resolve the bundle's backend and sign-in configuration
fitfam env        show the read-only app environment constants
"""

import typer

from fitfam import __version__
from fitfam.cli import configure, env


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"fitfam version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="fitfam",
    help="Inspect how a FitFam app bundle configures its backend and sign-in at startup",
    add_completion=True,
)

# Register subcommands
app.add_typer(configure.app, name="configure")
app.add_typer(env.app, name="env")


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        help="Show version and exit.",
    ),
):
    """
    Inspect FitFam startup configuration.

    'configure' reports whether the bundle runs configured, in demo mode, or
    with a partial failure, and whether sign-in can be offered.
    'env' lists the environment constants derived from Info.plist.

    Run 'fitfam <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        if not version:
            typer.echo(ctx.get_help())
            raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
