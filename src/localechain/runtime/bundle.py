"""In-memory translation store and plural rule provider."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from localechain.locale_utils import normalize_tag
from localechain.runtime.messages import message_from_value
from localechain.runtime.plural_rules import PluralRule

if TYPE_CHECKING:
    from localechain.localization.types import (
        LocaleTag,
        MessageId,
        PluralRuleEvaluator,
        TranslatableMessage,
    )

__all__ = ["Bundle"]

logger = logging.getLogger(__name__)


class Bundle:
    """Messages and plural rules for any number of locales.

    Implements the TranslationStore and PluralRuleProvider protocols, so one
    Bundle can back any number of Translator instances.

    Locale keys are trimmed and lower-cased on the way in and out; separators
    are kept, so "en-US" and "en_US" are different locales.

    Thread safety:
        Writers serialize on an internal lock and publish a new per-locale
        mapping with a single dict assignment. Readers take no lock and
        always see a complete mapping.

    Example:
        >>> bundle = Bundle()
        >>> bundle.add_messages("en-us", {
        ...     "greeting": "Hello, {Name}!",
        ...     "items": {"one": "{Count} item", "other": "{Count} items"},
        ... })
        >>> bundle.get_plural_rule("en-us")
        PluralRule('en-us')

    Args:
        auto_plural_rules: Register a CLDR PluralRule for each locale the
            first time messages are added for it (default: True)
    """

    __slots__ = ("_auto_plural_rules", "_lock", "_plural_rules", "_translations")

    def __init__(self, *, auto_plural_rules: bool = True) -> None:
        self._auto_plural_rules = auto_plural_rules
        self._translations: dict[LocaleTag, Mapping[MessageId, TranslatableMessage]] = {}
        self._plural_rules: dict[LocaleTag, PluralRuleEvaluator] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Bundle(locales={self.locales!r})"

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        """Locales that have at least one message, in insertion order."""
        return tuple(self._translations)

    def add_message(
        self, locale: str, message_id: MessageId, message: object
    ) -> None:
        """Add or replace one message.

        Args:
            locale: Locale tag
            message_id: Message identifier
            message: Template string, plural mapping, or TranslatableMessage

        Raises:
            TypeError: If message has an unsupported shape
            TemplateError: If a template is malformed
        """
        self.add_messages(locale, {message_id: message})

    def add_messages(self, locale: str, messages: Mapping[MessageId, object]) -> None:
        """Add or replace messages for a locale.

        All values are converted before anything is published, so a bad
        value leaves the bundle unchanged.

        Args:
            locale: Locale tag
            messages: Message id -> template string, plural mapping
                ({"one": ..., "other": ...}) or TranslatableMessage

        Raises:
            ValueError: If locale is empty
            TypeError: If a value has an unsupported shape
            TemplateError: If a template is malformed
        """
        tag = self._validate_locale(locale)
        converted = {
            message_id: message_from_value(value) for message_id, value in messages.items()
        }

        with self._lock:
            merged = dict(self._translations.get(tag, {}))
            merged.update(converted)
            self._translations[tag] = MappingProxyType(merged)
            if self._auto_plural_rules and tag not in self._plural_rules:
                self._plural_rules[tag] = PluralRule(tag)
                logger.debug("Registered CLDR plural rule for locale: %s", tag)

        for message_id in converted:
            logger.debug("Registered message: %s/%s", tag, message_id)
        logger.info("Added %d message(s) for locale '%s'", len(converted), tag)

    def add_plural_rule(self, locale: str, rule: PluralRuleEvaluator) -> None:
        """Set the plural rule for a locale, replacing any existing one."""
        tag = self._validate_locale(locale)
        with self._lock:
            self._plural_rules[tag] = rule
        logger.debug("Registered plural rule for locale: %s", tag)

    def get_messages(self, locale: LocaleTag) -> Mapping[MessageId, TranslatableMessage] | None:
        """Return a read-only message mapping for locale, or None."""
        return self._translations.get(normalize_tag(locale))

    def get_plural_rule(self, locale: LocaleTag) -> PluralRuleEvaluator | None:
        """Return the plural rule for locale, or None."""
        return self._plural_rules.get(normalize_tag(locale))

    def has_message(self, locale: LocaleTag, message_id: MessageId) -> bool:
        """Check whether locale has a message with this id."""
        messages = self.get_messages(locale)
        return messages is not None and message_id in messages

    @staticmethod
    def _validate_locale(locale: str) -> LocaleTag:
        tag = normalize_tag(locale)
        if not tag:
            msg = "Locale tag cannot be empty"
            raise ValueError(msg)
        return tag
