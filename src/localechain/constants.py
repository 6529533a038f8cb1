"""Shared constants for LocaleChain.

This module provides centralized configuration constants used across
the runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Language tags: Syntax used to extract tags from preference strings
- Arguments: Shape of caller-supplied translate() arguments
- Plural selectors: Bounds on numeric selectors handed to CLDR rules
- Cache limits: Memory bounds for Babel locale parsing
- Fallback strings: Text emitted for errors and missing template fields

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language tags
    "LANGUAGE_TAG_PATTERN",
    "TAG_SEPARATORS",
    # Arguments
    "COUNT_FIELD",
    "MAX_TRANSLATE_ARGS",
    # Plural selectors
    "MAX_SELECTOR_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_TRANSLATION_ERROR",
    "FALLBACK_MISSING_FIELD",
]

# ============================================================================
# LANGUAGE TAGS
# ============================================================================

# Matches language tags like en-US and zh-Hans-CN (case-insensitive).
# Subtags have at least two letters; at least one separator is required,
# so bare primary tags ("en") and q-weights ("q=0.8") never match.
LANGUAGE_TAG_PATTERN: str = r"[a-zA-Z]{2,}(?:[-_][a-zA-Z]{2,})+"

# Characters that split a tag into subtags during fallback expansion.
TAG_SEPARATORS: frozenset[str] = frozenset("-_")

# ============================================================================
# ARGUMENTS
# ============================================================================

# Data context field that carries the plural count into templates.
COUNT_FIELD: str = "Count"

# translate() accepts at most (count, data).
MAX_TRANSLATE_ARGS: int = 2

# ============================================================================
# PLURAL SELECTORS
# ============================================================================

# Upper bound on integer and fraction digits of a decimal selector.
# CLDR operand extraction converts the integer part to int, so an
# exponent like "1e999999999" would otherwise allocate without bound.
MAX_SELECTOR_DIGITS: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Emitted by Translator.translate() when plural classification fails.
# Format string - use .format(id=..., detail=...)
FALLBACK_TRANSLATION_ERROR: str = "[ERR][{id}] {detail}"

# Rendered in place of a template field that the data context lacks.
FALLBACK_MISSING_FIELD: str = "{{{name}}}"  # e.g., {Name}
