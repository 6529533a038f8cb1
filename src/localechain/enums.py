"""Enumerations for LocaleChain type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so Babel's CLDR category names
("one", "few", ...) convert directly with PluralForm(name).

Python 3.13+.
"""

from enum import StrEnum


class PluralForm(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralForm.ONE) == "one"
    """

    ZERO = "zero"
    """Zero quantity (e.g., Latvian 0, Arabic 0)"""

    ONE = "one"
    """Singular (e.g., English 1)"""

    TWO = "two"
    """Dual (e.g., Arabic 2, Slovenian 2)"""

    FEW = "few"
    """Paucal (e.g., Polish 2-4, Russian 2-4)"""

    MANY = "many"
    """Large quantities (e.g., Polish 5-21, Russian 5-20)"""

    OTHER = "other"
    """General plural; every locale has this category"""


__all__ = [
    "PluralForm",
]
