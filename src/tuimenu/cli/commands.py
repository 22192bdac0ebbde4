"""CLI command handlers."""

from tuimenu.utils.config import Config, get_tuimenu_dir
from tuimenu.utils.exceptions import TuimenuError


def cmd_run(args) -> int:
    """Run the interactive menu. Returns the process exit code."""
    from tuimenu.cli.ui.terminal import open_terminal
    from tuimenu.core.app import MenuApp
    from tuimenu.utils.debug import log_error

    config = Config(get_tuimenu_dir())
    try:
        menu = MenuApp(
            config.get_items(),
            title=config.get_title(),
            highlight_style=config.get_highlight_style(),
        )
        with open_terminal() as terminal:
            menu.run(terminal)
    except TuimenuError as e:
        # Screen is already restored here
        log_error("cli", str(e), e)
        return 1
    return 0


def cmd_status(args):
    """Show current configuration."""
    from tuimenu.cli.ui import console

    tuimenu_dir = get_tuimenu_dir()
    config = Config(tuimenu_dir)

    try:
        console.print(f"[bold]Title:[/bold] {config.get_title()}")
    except TuimenuError as e:
        console.print(f"[bold]Title:[/bold] [red]{e}[/red]")

    try:
        items = config.get_items()
    except TuimenuError as e:
        console.print(f"[bold]Items:[/bold] [red]{e}[/red]")
    else:
        if items:
            console.print(f"[bold]Items:[/bold] {len(items)}")
            for item in items:
                console.print(f"  [cyan]{item}[/cyan]")
        else:
            console.print("[bold]Items:[/bold] [red]none configured[/red]")

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )

    console.print(f"[bold]Config:[/bold] [dim]{tuimenu_dir}[/dim]")


def cmd_debug_on(args):
    """Enable debug logging."""
    from tuimenu.cli.ui import console

    config = Config(get_tuimenu_dir())
    config.set_debug(True)
    console.print("Debug mode [green]enabled[/green]")
    console.print(f"Logs: [dim]{config.debug_log_path}[/dim]")


def cmd_debug_off(args):
    """Disable debug logging."""
    from tuimenu.cli.ui import console

    config = Config(get_tuimenu_dir())
    config.set_debug(False)
    console.print("Debug mode [dim]disabled[/dim]")
