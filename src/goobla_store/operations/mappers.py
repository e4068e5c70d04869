"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "InvalidIdentity": 1,
    "InvalidDigestFormat": 2,
    "InvalidProtocol": 2,
    "InsecureProtocol": 2,
    "ValueError": 2,
    "StoreRootUnavailable": 4,
    "DirectoryCreateFailed": 5,
}

FALLBACK_EXIT_CODE = 3


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 0: Success
    - 1: Reference does not name a valid model (InvalidIdentity)
    - 2: Malformed input (InvalidDigestFormat, protocol errors, ValueError)
    - 3: Unknown error
    - 4: Models directory cannot be determined (StoreRootUnavailable)
    - 5: Store directory cannot be created (DirectoryCreateFailed)

    Args:
        exc: Exception to map

    Returns:
        Exit code, with 3 as fallback for unknown exceptions
    """
    return EXIT_CODES.get(type(exc).__name__, FALLBACK_EXIT_CODE)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit, printing the error message to stderr.

    Args:
        func: Function to execute

    Returns:
        Function result if successful

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        from .printers import print_error
        print_error(e)
        raise typer.Exit(code=exit_code_for(e)) from e
