"""Diagnostic system for LocaleChain errors.

Provides the exception hierarchy and structured error diagnostics with codes
and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidPluralSelectorError,
    LocaleChainError,
    TemplateError,
    TooManyArgumentsError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "InvalidPluralSelectorError",
    "LocaleChainError",
    "TemplateError",
    "TooManyArgumentsError",
]
