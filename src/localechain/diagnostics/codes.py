"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Caller contract errors (argument shape)
        2000-2999: Plural resolution errors
        3000-3999: Template errors
    """

    # Caller contract errors (1000-1999)
    TOO_MANY_ARGUMENTS = 1001

    # Plural resolution errors (2000-2999)
    PLURAL_SELECTOR_INVALID = 2001
    PLURAL_SELECTOR_TYPE = 2002
    PLURAL_SELECTOR_TOO_LARGE = 2003

    # Template errors (3000-3999)
    TEMPLATE_MALFORMED = 3001
    TEMPLATE_POSITIONAL_FIELD = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale in effect when the error occurred, if any
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic for log output.

        Example output:
            error[PLURAL_SELECTOR_INVALID]: Invalid plural selector 'abc'
              = locale: en-us
              = help: Pass an integer or a numeric string as the count

        Returns:
            Formatted error message
        """
        # Escape control characters so selector text cannot forge log lines
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.locale_code is not None:
            lines.append(f"  = locale: {_escape(self.locale_code)}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
