"""CLI entry point for tuimenu.

Uses Typer for command routing with lazy loading for performance.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="tuimenu",
    help="Minimal terminal menu",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the menu if no command given."""
    if ctx.invoked_subcommand is None:
        # Lazy load UI - only when interactive
        from tuimenu.cli.commands import cmd_run

        raise typer.Exit(cmd_run(None))


@app.command()
def status() -> None:
    """Show current configuration."""
    from tuimenu.cli.commands import cmd_status

    cmd_status(None)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from tuimenu.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from tuimenu.cli.commands import cmd_debug_off

    cmd_debug_off(None)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
