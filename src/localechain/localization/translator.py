"""Locale-preference driven message translation.

Translator binds a TranslationBundle to the candidate chain parsed from a
preference string, then resolves each translate() call by walking that
chain until a locale produces non-empty text.

Key architectural decisions:
- Immutable locale chain (established at construction)
- Arguments normalized once per call, before any lookup
- Missing message, missing plural rule and empty render all mean
  "try the next locale"; only a rejected plural selector stops the walk

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localechain.constants import FALLBACK_TRANSLATION_ERROR
from localechain.diagnostics import InvalidPluralSelectorError
from localechain.locale_utils import parse_language_tags
from localechain.runtime.arguments import normalize_arguments

if TYPE_CHECKING:
    from localechain.localization.types import LocaleTag, MessageId, TranslationBundle

__all__ = ["FallbackInfo", "Translator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when Translator resolves a message
    using a later candidate instead of the first one.

    Attributes:
        requested_locale: The first locale in the candidate chain
        resolved_locale: The locale that actually produced the text
        message_id: The message identifier that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_id} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> translator = Translator(bundle, "lv-LV, en-US", on_fallback=log_fallback)
    """

    requested_locale: LocaleTag
    resolved_locale: LocaleTag
    message_id: MessageId


class Translator:
    """Translates messages according to a locale preference string.

    The preference string is parsed once with parse_language_tags(): tags
    are extracted in input order, expanded to their fallback chains and
    deduplicated. Accept-Language headers work as-is, but q-weights are
    ignored (assumed monotonically decreasing).

    Translator holds no mutable state and is safe to share between threads,
    provided the bundle supports concurrent reads (Bundle does).

    Example:
        >>> bundle = Bundle()
        >>> bundle.add_messages("en-us", {
        ...     "items": {"one": "{Count} item", "other": "{Count} items"},
        ... })
        >>> translator = Translator(bundle, "fr, en-US;q=0.8")
        >>> translator.translate("items", "Items", 3)
        '3 items'
        >>> translator.translate("missing", "Default text")
        'Default text'

    Attributes:
        language_tags: Candidate locale tags, most preferred first
    """

    __slots__ = ("_bundle", "_language_tags", "_on_fallback")

    def __init__(
        self,
        bundle: TranslationBundle,
        preferences: str,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            bundle: Message store and plural rule provider
            preferences: Free-form locale preference string
                (e.g., "zh-Hans-CN, en-US;q=0.8")
            on_fallback: Optional callback invoked when a message resolves
                from a candidate other than the first one
        """
        self._bundle = bundle
        self._language_tags: tuple[LocaleTag, ...] = parse_language_tags(preferences)
        self._on_fallback = on_fallback
        logger.debug("Translator candidate locales: %s", self._language_tags)

    @property
    def bundle(self) -> TranslationBundle:
        """Bundle this translator reads from."""
        return self._bundle

    @property
    def language_tags(self) -> tuple[LocaleTag, ...]:
        """Candidate locale tags in resolution order."""
        return self._language_tags

    def __repr__(self) -> str:
        return f"Translator(language_tags={self._language_tags!r})"

    def translate(self, message_id: MessageId, default: str, *args: object) -> str:
        """Translate a message using the first locale that has usable text.

        Args:
            message_id: Message identifier
            default: Text returned when no candidate locale has the message
            *args: Optional plural count and/or data context:
                (), (count,), (count, data) or (data,)

        Returns:
            Rendered text, "[ERR][<id>] <detail>" if the plural count is
            rejected, or default

        Raises:
            TooManyArgumentsError: If more than two args are supplied
        """
        arguments = normalize_arguments(args)

        for tag in self._language_tags:
            messages = self._bundle.get_messages(tag)
            if messages is None:
                continue
            message = messages.get(message_id)
            if message is None:
                logger.debug("Message '%s' not found for locale '%s'", message_id, tag)
                continue
            plural_rule = self._bundle.get_plural_rule(tag)
            if plural_rule is None:
                logger.debug("No plural rule for locale '%s'; skipping '%s'", tag, message_id)
                continue

            try:
                form = plural_rule.classify(arguments.selector)
            except InvalidPluralSelectorError as e:
                if e.diagnostic is not None:
                    logger.warning("Message '%s': %s", message_id, e.diagnostic.format_error())
                else:
                    logger.warning("Message '%s': %s", message_id, e)
                return FALLBACK_TRANSLATION_ERROR.format(id=message_id, detail=e)

            translated = message.render(form, arguments.data)
            if not translated:
                logger.debug(
                    "Message '%s' rendered empty for locale '%s' (form %s)",
                    message_id,
                    tag,
                    form,
                )
                continue

            if self._on_fallback is not None and tag != self._language_tags[0]:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=self._language_tags[0],
                        resolved_locale=tag,
                        message_id=message_id,
                    )
                )
            return translated

        logger.debug("No translation for '%s'; using default", message_id)
        return default
