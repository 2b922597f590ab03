#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linesearch package.

This module defines specialized exception classes for the error conditions
that can occur while configuring and running a search. Every fatal condition
is detected before scanning starts or on the first I/O attempt; per-line
conditions such as "no match" are ordinary control flow and never raise.

Exception Hierarchy
-------------------
- LineSearchError (base exception)

  - ValidationError (argument/option validation)
    - DuplicateOptionError (flag supplied more than once)
    - RangeFormatError (malformed line range string)
    - SearchTermError (empty or over-length search term)

  - FileError (file access and I/O)
    - InputFileError (search file cannot be opened)
    - OutputFileError (save file cannot be created)

"""

from typing import Any


class LineSearchError(Exception):
    """Base exception class for all linesearch-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(LineSearchError):
    """Exception raised for invalid command-line arguments or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class DuplicateOptionError(ValidationError):
    """Exception raised when a flag is supplied more than once.

    Parameters
    ----------
    option_name : str
        The long option string of the repeated flag (e.g. ``--ignore-case``)

    """

    def __init__(self, option_name: str):
        """Initialize the duplicate option error."""
        super().__init__(
            f"ERROR: You can only employ a flag once ({option_name})",
            parameter_name=option_name,
        )
        self.option_name = option_name


class RangeFormatError(ValidationError):
    """Exception raised for invalid line range specifications.

    Parameters
    ----------
    message : str, optional
        Description of the range error
    parameter_value : any, optional
        The invalid range value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self, message: str | None = None, parameter_value: Any = None, original_error: Exception | None = None
    ):
        """Initialize the range format error."""
        if message is None:
            message = "ERROR: Invalid range format. Please use NUM-NUM or a non-negative number."
        super().__init__(
            message, parameter_name="range", parameter_value=parameter_value, original_error=original_error
        )


class SearchTermError(ValidationError):
    """Exception raised when the search term is empty or too long."""

    def __init__(self, message: str, parameter_value: Any = None):
        """Initialize the search term error."""
        super().__init__(message, parameter_name="term", parameter_value=parameter_value)


class FileError(LineSearchError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileError(FileError):
    """Exception raised when the file to search cannot be opened."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input file error."""
        if message is None:
            message = "search: Could not open search file."
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputFileError(FileError):
    """Exception raised when the save file cannot be created."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output file error."""
        if message is None:
            message = "search: Could not open save file."
        super().__init__(message, file_path=file_path, original_error=original_error)
