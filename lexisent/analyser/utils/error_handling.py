"""
Error types and handling utilities for the sentiment analyser.

Exceptions raised by the lexicon loader, record reader and scoring engine
live here, together with small helpers that standardize the log-then-raise
pattern used throughout the codebase.
"""

import bittensor as bt
from typing import Any, Dict, Optional


class PathError(OSError):
    """A lexicon or record source path is missing or is neither a file nor a directory."""

    def __init__(self, path, reason: str = "not a file or directory"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid path '{self.path}': {reason}")


class ParseError(ValueError):
    """A lexicon line carries a score that is not a floating-point literal."""

    def __init__(self, file_path, line_number: int, line: str):
        self.file_path = str(file_path)
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Invalid sentiment score in file: {self.file_path} "
            f"Line {line_number}: {line}"
        )


class BatchTimeoutError(TimeoutError):
    """A batch of concurrent tasks did not finish within its bounded wait."""

    def __init__(self, operation: str, timeout: float, pending: int):
        self.operation = operation
        self.timeout = timeout
        self.pending = pending
        super().__init__(
            f"{operation} did not finish within {timeout}s "
            f"({pending} task(s) still outstanding)"
        )


def log_and_raise_processing_error(
    error: Exception,
    operation: str,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log processing error with context and raise RuntimeError.

    Args:
        error: The original exception
        operation: Description of the operation that failed
        context: Additional context information

    Raises:
        RuntimeError: Always raises with formatted message
    """
    bt.logging.error(
        f"Processing operation '{operation}' failed: {error}",
        extra={
            'operation': operation,
            'context': context,
            'error_type': type(error).__name__
        }
    )
    raise RuntimeError(f"Processing operation '{operation}' failed: {error}") from error


def log_and_raise_config_error(
    message: str,
    config_key: Optional[str] = None,
    config_value: Optional[str] = None
) -> None:
    """
    Log configuration error and raise ValueError.

    Args:
        message: Error message describing the configuration issue
        config_key: The configuration key that's problematic
        config_value: The problematic value

    Raises:
        ValueError: Always raises with formatted message
    """
    bt.logging.error(
        f"Configuration error: {message}",
        extra={'config_key': config_key, 'config_value': config_value}
    )

    raise ValueError(f"{message} (config_key: {config_key})")


def log_and_raise_timeout(operation: str, timeout: float, pending: int) -> None:
    """
    Log a batch timeout and raise BatchTimeoutError.

    Raises:
        BatchTimeoutError: Always raises
    """
    error = BatchTimeoutError(operation, timeout, pending)
    bt.logging.error(
        f"Batch timeout: {error}",
        extra={'operation': operation, 'timeout': timeout, 'pending': pending}
    )
    raise error


# Standard error messages for consistency
class ErrorMessages:
    """Standard error messages for consistency."""

    # Path errors
    LEXICON_PATH_MISSING = "No valid lexicon path provided"
    RECORDS_PATH_MISSING = "No valid records path provided"
    NO_LEXICON_FILES = "No lexicon files found in the directory"

    # Processing errors
    LEXICON_LOAD_FAILED = "Lexicon loading"
    SCORING_FAILED = "Tweet scoring"
    EMPTY_LEXICON = "The combined lexicon is empty; configure lexicons before scoring"
