"""Preference-driven localization package.

Submodules:
    types      - PEP 695 type aliases (LocaleTag, MessageId, DataContext) and
                 collaborator protocols (TranslationStore, PluralRuleProvider,
                 PluralRuleEvaluator, TranslatableMessage)
    translator - Translator and FallbackInfo

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localechain.localization.translator import FallbackInfo, Translator
from localechain.localization.types import (
    DataContext,
    LocaleTag,
    MessageId,
    PluralRuleEvaluator,
    PluralRuleProvider,
    TranslatableMessage,
    TranslationBundle,
    TranslationStore,
)

__all__ = [
    # Resolver
    "Translator",
    # Fallback observability
    "FallbackInfo",
    # Collaborator protocols
    "TranslationStore",
    "PluralRuleProvider",
    "TranslationBundle",
    "PluralRuleEvaluator",
    "TranslatableMessage",
    # Type aliases for user code type annotations
    "DataContext",
    "LocaleTag",
    "MessageId",
]
