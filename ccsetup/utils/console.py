"""Rich-based console output utilities.

This module provides colored terminal output functions shared by the
setup wizard and the CLI entry point.
"""

import platform

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from ccsetup import APP_NAME, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold cyan",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)

# Width of the "=====" rules around the banner and the summary
RULE_WIDTH = 50


def print_error(message: str) -> None:
    """Print error message in red.

    Args:
        message: Error message to display
    """
    from ccsetup.utils.logging import log_message

    console_err.print(f"[error]✗[/error] [red]{escape(message)}[/red]", highlight=False)
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green.

    Args:
        message: Success message to display
    """
    from ccsetup.utils.logging import log_message

    console.print(f"[success]✓[/success] [green]{escape(message)}[/green]", highlight=False)
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow.

    Args:
        message: Warning message to display
    """
    from ccsetup.utils.logging import log_message

    console.print(f"[warning]⚠[/warning] [yellow]{escape(message)}[/yellow]", highlight=False)
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in cyan.

    Args:
        message: Info message to display
    """
    from ccsetup.utils.logging import log_message

    console.print(f"[info]→[/info] [cyan]{escape(message)}[/cyan]", highlight=False)
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta.

    Args:
        title: Header title to display
    """
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Print an indented detail line under a step."""
    console.print(f"  {message}", markup=False, highlight=False)


def print_rule() -> None:
    console.print("=" * RULE_WIDTH, markup=False)


def show_banner() -> None:
    """Display the welcome banner with host system information."""
    console.print()
    print_rule()
    console.print(f"[bold cyan]  {APP_NAME} Setup[/bold cyan] [white]v{__version__}[/white]")
    print_rule()
    console.print(f"  System: {platform.system().lower()}/{platform.machine().lower()}")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "RULE_WIDTH",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_rule",
    "show_banner",
]
