"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from tempo_cli.repositories import TaskNotFoundError
from tempo_cli.services.export_service import ExportFormatError
from tempo_cli.utils import exit_codes
from tempo_cli.utils.logger import get_logger
from tempo_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _as_app_error(e: Exception) -> AppError | None:
    """Map domain exceptions to a message and a semantic exit code."""
    if isinstance(e, TaskNotFoundError):
        return AppError(str(e), exit_codes.ERROR_NOT_FOUND)
    if isinstance(e, ExportFormatError):
        return AppError(str(e), exit_codes.ERROR_STORAGE)
    if isinstance(e, ValidationError):
        return AppError(f"Invalid value: {e}", exit_codes.ERROR_INVALID_ARGS)
    return None


def command_wrapper(func: Callable):
    """Run a (possibly async) command with logging and error mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if inspect.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except typer.Exit:
            # Typer's own exits (--help, explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            app_error = e if isinstance(e, AppError) else _as_app_error(e)
            if app_error is not None:
                logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, app_error)
                format_error(str(app_error))
                raise typer.Exit(code=app_error.exit_code) from e

            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
