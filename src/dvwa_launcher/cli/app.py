#!/usr/bin/env python3
"""
Main CLI Application for dvwa-launcher

This module contains the Typer app and entry point. Invoked without
arguments it provisions Docker and runs DVWA in the foreground.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
import sys

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.traceback import install

try:
    from typing import Annotated  # Python 3.9+
except ImportError:
    from typing_extensions import Annotated  # Python 3.8

from dvwa_launcher import __version__
from dvwa_launcher.core.console import Console
from dvwa_launcher.core.errors import LauncherError, handle_error
from dvwa_launcher.orchestration import DeployConfig, DeployOrchestrator

from .constants import (
    DOCKER_GROUP,
    DOCKER_SERVICE,
    DVWA_IMAGE,
    DVWA_PORT,
    OS_RELEASE_PATH,
    ExitCode,
)
from .utils import console, default_log_file, setup_logging

# Install rich traceback handler for better error displays
install(show_locals=False)

logger = logging.getLogger(__name__)

# Initialize the main Typer app
app = typer.Typer(
    name="dvwa-launcher",
    help="🐳 Install Docker if needed and run DVWA on http://localhost:80",
    rich_markup_mode="rich",
    add_completion=False,
)


@app.command()
def deploy(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """
    🐳 Provision Docker and run the DVWA container.

    Detects the distribution, installs and starts Docker, frees port 80,
    pulls vulnerables/web-dvwa and runs it until Ctrl+C.
    """
    if version:
        console.print(
            f"🐳 [bold cyan]dvwa-launcher[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit()

    log_file = default_log_file()
    try:
        setup_logging(verbose, log_file=log_file)
    except OSError as e:
        console.print(
            f"💥 [bold red]Cannot open log file {escape(log_file)}: "
            f"{escape(str(e))}[/bold red]"
        )
        raise typer.Exit(ExitCode.FAILURE)

    console.print(
        Panel(
            f"🐳 [bold cyan]DVWA Docker Startup[/bold cyan]\n"
            f"Image: [yellow]{DVWA_IMAGE}[/yellow]\n"
            f"Port: [yellow]{DVWA_PORT}[/yellow]\n"
            f"Log file: [yellow]{escape(log_file)}[/yellow]",
            title="Deployment Configuration",
            border_style="green",
        )
    )

    config = DeployConfig(
        image=DVWA_IMAGE,
        port=DVWA_PORT,
        log_file=log_file,
        os_release_path=OS_RELEASE_PATH,
        docker_group=DOCKER_GROUP,
        service_name=DOCKER_SERVICE,
    )
    orchestrator = DeployOrchestrator(
        config, console=Console(shellVerbose=verbose, live_output=True)
    )

    try:
        orchestrator.execute()
    except LauncherError as e:
        handle_error(e)
        raise typer.Exit(ExitCode.FAILURE)
    except KeyboardInterrupt:
        logger.warning("🛑 [yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(ExitCode.FAILURE)

    raise typer.Exit(ExitCode.SUCCESS)


def cli_main() -> None:
    """Entry point for the CLI application."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n🛑 [yellow]Operation cancelled by user[/yellow]")
        sys.exit(ExitCode.FAILURE)
    except Exception as e:
        console.print(f"💥 [bold red]Unexpected error: {e}[/bold red]")
        console.print_exception()
        sys.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    cli_main()
