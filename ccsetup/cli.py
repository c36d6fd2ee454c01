"""CLI interface for CCSETUP.

This module provides the Typer-based entry point. The tool takes no flags:
everything is collected interactively by the setup wizard.
"""

import typer

from ccsetup.config.manager import ConfigManager
from ccsetup.env.factory import create_environment_store
from ccsetup.utils.console import print_error, print_info, show_banner
from ccsetup.utils.errors import ExitCode, SetupError
from ccsetup.utils.logging import log_message, setup_logging
from ccsetup.wizard import run_setup

# Create Typer app
app = typer.Typer(
    name="ccsetup",
    help="CCSETUP - Interactive environment setup for the Claude Code CLI",
    add_completion=False,
    no_args_is_help=False,
)


@app.command()
def main() -> None:
    """Configure the Claude Code CLI environment variables.

    Asks for the API base URL, auth token and model identifiers, verifies
    the connection and saves everything as user environment variables.
    """
    setup_logging()

    try:
        show_banner()

        store = create_environment_store()
        config = ConfigManager(store)
        result = run_setup(config)

    except SetupError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    if not result.success:
        if result.exit_code == ExitCode.USER_CANCELLED:
            print_info(f"\n{result.error_message}")
        log_message(f"Setup finished with exit code {int(result.exit_code)}")
        raise typer.Exit(result.exit_code)

    log_message("Setup finished successfully")


if __name__ == "__main__":
    app()
