"""Hypothesis strategies for LocaleChain property-based testing.

Usage:
    from tests.strategies import language_tags, preference_strings
"""

from .localization import language_tags, preference_strings, translate_args

__all__ = [
    "language_tags",
    "preference_strings",
    "translate_args",
]
