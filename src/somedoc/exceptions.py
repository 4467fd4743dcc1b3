#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/exceptions.py
"""Custom exceptions for the somedoc library.

This module defines specialized exception classes for the error conditions
that can occur while building a document model, selecting an output format,
reading the JSON interchange form, or writing rendered output.

Exception Hierarchy
-------------------
- SomedocError (base exception)

  - ValidationError (construction-time domain errors)
    - LabelError (empty label or illegal label character)
    - InvalidOptionsError (wrong options class for renderer)

  - FormatError (unknown output format or markdown flavor)

  - ParsingError (JSON interchange read failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from __future__ import annotations

from typing import Any


class SomedocError(Exception):
    """Base exception class for all somedoc-specific errors.

    Catching this will catch every error raised deliberately by the library.

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


class ValidationError(SomedocError):
    """Exception raised when a model value fails validation at construction.

    This exception covers errors such as:
    - An empty string where a value is required
    - An illegal character in a restricted field (emoji names, labels)
    - An out-of-range heading level

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class LabelError(ValidationError):
    """Exception raised when a string is not a valid label.

    Parameters
    ----------
    value : str
        The rejected label text
    reason : {'empty', 'illegal_character'}
        Why the value was rejected
    position : int, optional
        Index of the first illegal character

    """

    def __init__(self, value: str, reason: str, position: int | None = None):
        """Initialize the label error."""
        if reason == "empty":
            message = "Label must not be empty"
        elif position is not None:
            message = f"Illegal character {value[position]!r} at position {position} in label {value!r}"
        else:
            message = f"Illegal character in label {value!r}"
        super().__init__(message, parameter_name="label", parameter_value=value)
        self.reason = reason
        self.position = position


class InvalidOptionsError(ValidationError):
    """Exception raised when incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FormatError(SomedocError):
    """Exception raised when an output format or flavor name is not recognized.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unrecognized format string
    supported_formats : list[str], optional
        List of supported formats for reference

    Attributes
    ----------
    format_type : str or None
        The format that was not recognized
    supported_formats : list[str] or None
        Available supported formats

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unknown format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats include: {', '.join(supported_formats)}"
            else:
                message = "Unknown format"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(SomedocError):
    """Exception raised when the JSON interchange form cannot be read.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(SomedocError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "SomedocError",
    "ValidationError",
    "LabelError",
    "InvalidOptionsError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
