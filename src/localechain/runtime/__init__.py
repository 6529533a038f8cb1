"""Runtime collaborators for the Translator.

Provides the in-memory Bundle, CLDR plural rules and message types, plus
normalization of translate() arguments.

Python 3.13+. Depends on Babel for CLDR plural rules.
"""

from .arguments import NormalizedArguments, is_plural_count, normalize_arguments, to_data_context
from .bundle import Bundle
from .messages import PluralMessage, SimpleMessage, message_from_value
from .plural_rules import PluralRule, select_plural_category

__all__ = [
    "Bundle",
    "NormalizedArguments",
    "PluralMessage",
    "PluralRule",
    "SimpleMessage",
    "is_plural_count",
    "message_from_value",
    "normalize_arguments",
    "select_plural_category",
    "to_data_context",
]
