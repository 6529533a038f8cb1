"""LocaleChain exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Each concrete error also subclasses the builtin exception a caller would
naturally catch (TypeError for contract violations, ValueError for bad
values), so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocaleChainError(Exception):
    """Base exception for all LocaleChain errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleChainError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class TooManyArgumentsError(LocaleChainError, TypeError):
    """translate() was called with more than (count, data).

    This is a programming error in the caller. It is never caught
    inside LocaleChain and always propagates out of translate().
    """


class InvalidPluralSelectorError(LocaleChainError, ValueError):
    """Plural rule evaluator rejected the selector.

    Raised by PluralRuleEvaluator.classify(). The Translator converts it
    into an "[ERR][<id>] <detail>" string instead of propagating it.

    Attributes:
        selector: The rejected selector value
        locale_code: Locale whose rule rejected it
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        selector: object = None,
        locale_code: str = "",
    ) -> None:
        """Initialize InvalidPluralSelectorError.

        Args:
            message: Error message string OR Diagnostic object
            selector: The rejected selector value
            locale_code: Locale whose rule rejected it
        """
        super().__init__(message)
        self.selector = selector
        self.locale_code = locale_code


class TemplateError(LocaleChainError, ValueError):
    """Message template cannot be rendered.

    Raised when a message is constructed, never during translate().
    """
