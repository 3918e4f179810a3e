#!/usr/bin/env python3
"""
Unified error handling for dvwa-launcher.

Every failure the launcher knows about is raised as a LauncherError
subclass carrying a category, an optional ErrorContext and operator
suggestions. The ErrorHandler renders them with Rich and records them
through logging so that the run log holds the same message the operator
saw.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class ErrorCategory(Enum):
    """Error category enumeration."""

    ENVIRONMENT = "environment"
    PLATFORM = "platform"
    INSTALLATION = "installation"
    SERVICE = "service"
    PERMISSION = "permission"
    CONTAINER = "container"
    REGISTRY = "registry"
    COMMAND = "command"


# Display metadata per category: (emoji, title, border style)
_CATEGORY_DISPLAY = {
    ErrorCategory.ENVIRONMENT: ("🔍", "Environment Error", "red"),
    ErrorCategory.PLATFORM: ("🐧", "Platform Error", "red"),
    ErrorCategory.INSTALLATION: ("📦", "Installation Error", "red"),
    ErrorCategory.SERVICE: ("⚙️", "Service Error", "red"),
    ErrorCategory.PERMISSION: ("🔐", "Permission Error", "yellow"),
    ErrorCategory.CONTAINER: ("🐳", "Container Error", "red"),
    ErrorCategory.REGISTRY: ("🌐", "Registry Error", "red"),
    ErrorCategory.COMMAND: ("💥", "Command Error", "red"),
}


@dataclass
class ErrorContext:
    """Where an error happened."""

    operation: str
    phase: Optional[str] = None
    component: Optional[str] = None
    command: Optional[str] = None
    file_path: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


def create_error_context(
    operation: str,
    phase: Optional[str] = None,
    component: Optional[str] = None,
    command: Optional[str] = None,
    file_path: Optional[str] = None,
    additional_info: Optional[Dict[str, Any]] = None,
) -> ErrorContext:
    """Convenience constructor for ErrorContext."""
    return ErrorContext(
        operation=operation,
        phase=phase,
        component=component,
        command=command,
        file_path=file_path,
        additional_info=additional_info,
    )


class LauncherError(Exception):
    """Base class for all dvwa-launcher errors.

    Attributes:
        message: Human readable message.
        category: ErrorCategory of the failure.
        context: Optional ErrorContext.
        recoverable: Whether the run can continue after this error.
        suggestions: Hints shown to the operator.
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: Optional[ErrorContext] = None,
        recoverable: bool = False,
        suggestions: Optional[List[str]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context
        self.recoverable = recoverable
        self.suggestions = suggestions or []
        self.cause = cause


class CommandError(LauncherError):
    """A shell command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        output: str = "",
        **kwargs,
    ) -> None:
        super().__init__(message, ErrorCategory.COMMAND, recoverable=False, **kwargs)
        self.command = command
        self.exit_code = exit_code
        self.output = output


class DetectionError(LauncherError):
    """The host distribution could not be detected."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.ENVIRONMENT, recoverable=False, **kwargs)


class UnsupportedPlatformError(LauncherError):
    """The host distribution has no installation procedure."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.PLATFORM, recoverable=False, **kwargs)


class InstallationError(LauncherError):
    """A package manager step failed while installing Docker."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.INSTALLATION, recoverable=False, **kwargs)


class ServiceError(LauncherError):
    """The Docker service could not be started or enabled."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.SERVICE, recoverable=False, **kwargs)


class PermissionAdjustmentError(LauncherError):
    """The user could not be added to the docker group."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.PERMISSION, recoverable=True, **kwargs)


class PortConflictError(LauncherError):
    """A container holding the target port could not be stopped."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.CONTAINER, recoverable=False, **kwargs)


class PullError(LauncherError):
    """The image could not be pulled from the registry."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.REGISTRY, recoverable=False, **kwargs)


class RunError(LauncherError):
    """The foreground container exited with an error."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, ErrorCategory.CONTAINER, recoverable=False, **kwargs)


class ErrorHandler:
    """Render errors to the console and record them in the log."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False) -> None:
        self.console = console or Console()
        self.verbose = verbose
        self.logger = logging.getLogger("dvwa_launcher.errors")

    def handle_error(
        self,
        error: BaseException,
        context: Optional[ErrorContext] = None,
        show_traceback: Optional[bool] = None,
    ) -> None:
        """Display an error panel and log the error message.

        Args:
            error: The exception to report.
            context: Context to use when the error carries none.
            show_traceback: Force traceback display; defaults to verbose.
        """
        if show_traceback is None:
            show_traceback = self.verbose

        if isinstance(error, LauncherError):
            emoji, title, style = _CATEGORY_DISPLAY[error.category]
            context = error.context or context
            suggestions = error.suggestions
        else:
            emoji, title, style = "💥", type(error).__name__, "red"
            suggestions = []

        body = f"[bold]{escape(str(error))}[/bold]"
        if context is not None:
            details = [
                f"{name}: {escape(str(value))}"
                for name, value in (
                    ("Operation", context.operation),
                    ("Phase", context.phase),
                    ("Component", context.component),
                    ("Command", context.command),
                    ("File", context.file_path),
                )
                if value
            ]
            if details:
                body += "\n\n[dim]" + "\n".join(details) + "[/dim]"
        if suggestions:
            body += "\n\n💡 [cyan]Suggestions:[/cyan]"
            for suggestion in suggestions:
                body += f"\n  • {escape(suggestion)}"

        self.console.print(
            Panel(body, title=f"{emoji} {title}", border_style=style, expand=False)
        )

        # File handlers only; the panel above is the console rendering.
        # One log line per failure, suggestions folded in.
        message = str(error)
        if suggestions:
            message += " (" + "; ".join(suggestions) + ")"
        self.logger.error(escape(message), extra={"console": False})

        if show_traceback:
            self.console.print_exception()


_error_handler: Optional[ErrorHandler] = None


def set_error_handler(handler: Optional[ErrorHandler]) -> None:
    """Install the process-wide error handler."""
    global _error_handler
    _error_handler = handler


def get_error_handler() -> Optional[ErrorHandler]:
    """Return the process-wide error handler."""
    return _error_handler


def handle_error(
    error: BaseException,
    context: Optional[ErrorContext] = None,
    show_traceback: Optional[bool] = None,
) -> None:
    """Report an error through the global handler, or plain logging."""
    if _error_handler is None:
        logging.error("%s", error)
        return
    _error_handler.handle_error(error, context=context, show_traceback=show_traceback)
