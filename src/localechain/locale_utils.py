"""Locale utilities for preference parsing and Babel lookups.

Centralizes locale tag handling used throughout the codebase:
- Extraction of language tags from free-form preference strings
  (Accept-Language header values, user settings, CLI flags)
- Fallback expansion (zh-hans-cn -> zh-hans)
- First-occurrence deduplication of the resulting candidate chain
- Cached Babel Locale parsing for CLDR plural rules

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from localechain.constants import LANGUAGE_TAG_PATTERN, MAX_LOCALE_CACHE_SIZE, TAG_SEPARATORS

if TYPE_CHECKING:
    from babel import Locale

    from localechain.localization.types import LocaleTag

__all__ = [
    "LANGUAGE_TAG_RE",
    "clear_locale_cache",
    "dedupe",
    "expand_tag",
    "get_babel_locale",
    "normalize_locale",
    "normalize_tag",
    "parse_language_tags",
]

LANGUAGE_TAG_RE: re.Pattern[str] = re.compile(LANGUAGE_TAG_PATTERN)


def normalize_tag(tag: str) -> LocaleTag:
    """Trim and lower-case a locale tag.

    Separators are kept as given: "en_US" and "en-US" normalize to
    different tags.

    Example:
        >>> normalize_tag("  zh-Hans-CN ")
        'zh-hans-cn'
    """
    return tag.strip().lower()


def expand_tag(tag: str) -> list[LocaleTag]:
    """Expand a language tag into its fallback chain.

    Trailing subtags are removed one at a time, most specific first.
    Truncation stops before the primary subtag: a bare "zh" is never
    produced, since single-segment tags are not candidates.

    Args:
        tag: Language tag with at least one separator (e.g., "zh-Hans-CN")

    Returns:
        Normalized tags, most specific first

    Example:
        >>> expand_tag("zh-Hans-CN")
        ['zh-hans-cn', 'zh-hans']
        >>> expand_tag("en-US")
        ['en-us']
    """
    tag = normalize_tag(tag)
    tags = [tag]
    for i in range(len(tag) - 1, 0, -1):
        if tag[i] in TAG_SEPARATORS:
            prefix = tag[:i]
            if not any(sep in prefix for sep in TAG_SEPARATORS):
                break
            tags.append(prefix)
    return tags


def dedupe(items: Iterable[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each item.

    Example:
        >>> dedupe(["en-us", "en-gb", "en-us"])
        ['en-us', 'en-gb']
    """
    seen: set[str] = set()
    deduped: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            deduped.append(item)
    return deduped


def parse_language_tags(preferences: str) -> tuple[LocaleTag, ...]:
    """Parse a preference string into an ordered candidate chain.

    Every substring matching the language tag syntax is expanded with
    expand_tag(), expansions are concatenated in input order, and the
    result is deduplicated.

    Accept-Language headers (RFC 2616) are accepted, but weights are
    assumed to be monotonically decreasing: q-values are ignored and
    tags keep their left-to-right order.

    Args:
        preferences: Free-form preference string

    Returns:
        Candidate locale tags, most preferred and most specific first

    Example:
        >>> parse_language_tags("zh-Hans-CN, en-US;q=0.8, fr")
        ('zh-hans-cn', 'zh-hans', 'en-us')
    """
    tags: list[LocaleTag] = []
    for match in LANGUAGE_TAG_RE.finditer(preferences):
        tags.extend(expand_tag(match.group(0)))
    return tuple(dedupe(tags))


def normalize_locale(locale_code: str) -> str:
    """Convert a locale tag to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Babel's parser handles case itself, so case is preserved.

    Example:
        >>> normalize_locale("pt-br")
        'pt_br'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format, any case)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("zh-hans-cn")
        >>> locale.language, locale.script, locale.territory
        ('zh', 'Hans', 'CN')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()
