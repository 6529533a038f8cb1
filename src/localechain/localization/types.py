"""Type aliases and collaborator protocols for the localization domain.

The Translator only reads from its collaborators. These protocols
(structural typing, not ABCs) let applications supply their own stores,
plural rules and message types; localechain.runtime provides the
in-memory implementations.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from localechain.enums import PluralForm

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LocaleTag",
    "MessageId",
    "DataContext",
    # Protocols
    "TranslatableMessage",
    "PluralRuleEvaluator",
    "TranslationStore",
    "PluralRuleProvider",
    "TranslationBundle",
]

MessageId: TypeAlias = str
"""Identifier for a message (e.g., 'greeting', 'items-in-cart')."""

LocaleTag: TypeAlias = str
"""Normalized (trimmed, lower-cased) locale tag (e.g., 'en-us', 'zh-hans-cn')."""

DataContext: TypeAlias = dict[str, object]
"""Named values supplied to a message template at render time."""


class TranslatableMessage(Protocol):
    """A renderable unit of localized text bound to one locale."""

    def render(self, form: PluralForm, data: Mapping[str, object] | None) -> str:
        """Render the message.

        Args:
            form: Plural form selected for the current count
            data: Data context for template fields (None when absent)

        Returns:
            Rendered text; an empty string means no content for this form
        """
        ...


class PluralRuleEvaluator(Protocol):
    """Maps a plural selector to a locale's plural form."""

    def classify(self, selector: object) -> PluralForm:
        """Classify a selector.

        Raises:
            InvalidPluralSelectorError: If the selector is not a valid
                pluralization count for this locale
        """
        ...


class TranslationStore(Protocol):
    """Read access to messages grouped by locale."""

    def get_messages(self, locale: LocaleTag) -> Mapping[MessageId, TranslatableMessage] | None:
        """Return the message mapping for locale, or None if absent."""
        ...


class PluralRuleProvider(Protocol):
    """Read access to plural rules by locale."""

    def get_plural_rule(self, locale: LocaleTag) -> PluralRuleEvaluator | None:
        """Return the plural rule for locale, or None if absent."""
        ...


class TranslationBundle(TranslationStore, PluralRuleProvider, Protocol):
    """Store and plural rule provider in one object (e.g., Bundle)."""
