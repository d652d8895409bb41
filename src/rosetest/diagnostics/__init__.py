"""Diagnostic system for rosetest errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConfigurationError, FuzzerError, RoseTestError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FuzzerError",
    "OutputFormat",
    "RoseTestError",
]
