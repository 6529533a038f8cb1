"""LocaleChain - preference-driven message lookup with CLDR plurals.

Resolves a message id against an ordered, fallback-expanded list of locale
candidates parsed from a preference string (e.g., an Accept-Language
header), choosing the grammatical plural form from a count.

Public API:
    Translator - Resolves messages for one preference string
    Bundle - In-memory messages and plural rules per locale
    PluralRule - CLDR plural rule evaluator (Babel)
    SimpleMessage, PluralMessage - Translatable message types
    PluralForm - CLDR plural categories
    FallbackInfo - Record passed to Translator's on_fallback callback
    parse_language_tags - Preference string to candidate chain

Exceptions:
    LocaleChainError - Base exception class
    TooManyArgumentsError - translate() called with more than two args
    InvalidPluralSelectorError - Plural rule rejected a count
    TemplateError - Malformed message template

Submodules:
    localechain.localization - Translator and collaborator protocols
    localechain.runtime - Bundle, plural rules, messages, argument handling
    localechain.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    InvalidPluralSelectorError,
    LocaleChainError,
    TemplateError,
    TooManyArgumentsError,
)
from .enums import PluralForm
from .locale_utils import parse_language_tags
from .localization import FallbackInfo, Translator
from .runtime import Bundle, PluralMessage, PluralRule, SimpleMessage

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localechain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bundle",
    "FallbackInfo",
    "InvalidPluralSelectorError",
    "LocaleChainError",
    "PluralForm",
    "PluralMessage",
    "PluralRule",
    "SimpleMessage",
    "TemplateError",
    "TooManyArgumentsError",
    "Translator",
    "__version__",
    "parse_language_tags",
]
