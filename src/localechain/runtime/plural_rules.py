"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data,
wrapped in PluralRule, the evaluator Bundle registers per locale.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from babel.core import UnknownLocaleError

from localechain.constants import MAX_SELECTOR_DIGITS
from localechain.diagnostics import Diagnostic, DiagnosticCode, InvalidPluralSelectorError
from localechain.enums import PluralForm
from localechain.locale_utils import get_babel_locale, normalize_tag

__all__ = ["PluralRule", "select_plural_category"]

logger = logging.getLogger(__name__)

_SELECTOR_HINT = "Pass an integer, a Decimal, or a numeric string as the count"


def _one_other(n: int | Decimal) -> str:
    # Most common pattern: n == 1 -> "one", else -> "other"
    return "one" if abs(n) == 1 else "other"


class PluralRule:
    """CLDR plural rule evaluator for one locale.

    Implements the PluralRuleEvaluator protocol. Rules come from Babel's
    Locale.plural_form, which covers all CLDR categories and operands
    (n, i, v, w, f, t, e). Locales unknown to Babel fall back to the
    one/other rule.

    Accepted selectors:
        - None: no count supplied; classified as OTHER
        - int (bool excluded) and finite Decimal
        - str holding a decimal number ("3", "1.50", " 2 ")

    Example:
        >>> PluralRule("ru-ru").classify(3)
        <PluralForm.FEW: 'few'>
        >>> PluralRule("en-us").classify("1.0")
        <PluralForm.OTHER: 'other'>
    """

    __slots__ = ("_locale", "_rule")

    def __init__(self, locale: str) -> None:
        """Load the plural rule for locale.

        Args:
            locale: Locale tag (BCP-47 or POSIX, any case)
        """
        self._locale = normalize_tag(locale)
        rule: Callable[[int | Decimal], str]
        try:
            rule = get_babel_locale(self._locale).plural_form
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to one/other plural rule",
                self._locale,
                e,
            )
            rule = _one_other
        self._rule = rule

    @property
    def locale(self) -> str:
        """Locale tag this rule was loaded for."""
        return self._locale

    def __repr__(self) -> str:
        return f"PluralRule({self._locale!r})"

    def classify(self, selector: object) -> PluralForm:
        """Classify selector into a plural form.

        Args:
            selector: Plural count (see class docstring for accepted shapes)

        Returns:
            CLDR plural form for this locale

        Raises:
            InvalidPluralSelectorError: If selector is not a valid count
        """
        match selector:
            case None:
                return PluralForm.OTHER
            case bool():
                raise self._error(
                    DiagnosticCode.PLURAL_SELECTOR_TYPE,
                    f"Invalid plural selector type bool: {selector!r}",
                    selector,
                )
            case int():
                return PluralForm(self._rule(selector))
            case Decimal():
                return PluralForm(self._rule(self._check_decimal(selector, selector)))
            case str():
                try:
                    value = Decimal(selector)
                except InvalidOperation:
                    raise self._error(
                        DiagnosticCode.PLURAL_SELECTOR_INVALID,
                        f"Invalid plural selector {selector!r}: not a number",
                        selector,
                    ) from None
                return PluralForm(self._rule(self._check_decimal(value, selector)))
            case _:
                raise self._error(
                    DiagnosticCode.PLURAL_SELECTOR_TYPE,
                    f"Invalid plural selector type {type(selector).__name__}: {selector!r}",
                    selector,
                )

    def _check_decimal(self, value: Decimal, selector: object) -> Decimal:
        """Reject non-finite and oversized decimals."""
        if not value.is_finite():
            raise self._error(
                DiagnosticCode.PLURAL_SELECTOR_INVALID,
                f"Invalid plural selector {selector!r}: not a finite number",
                selector,
            )
        exponent = value.as_tuple().exponent
        assert isinstance(exponent, int)  # Type narrowing: finite decimals have int exponents
        if value.adjusted() >= MAX_SELECTOR_DIGITS or -exponent > MAX_SELECTOR_DIGITS:
            raise self._error(
                DiagnosticCode.PLURAL_SELECTOR_TOO_LARGE,
                f"Invalid plural selector {selector!r}: more than "
                f"{MAX_SELECTOR_DIGITS} digits",
                selector,
            )
        return value

    def _error(
        self, code: DiagnosticCode, message: str, selector: object
    ) -> InvalidPluralSelectorError:
        diagnostic = Diagnostic(
            code=code,
            message=message,
            hint=_SELECTOR_HINT,
            locale_code=self._locale,
        )
        return InvalidPluralSelectorError(
            diagnostic, selector=selector, locale_code=self._locale
        )


def select_plural_category(n: int | Decimal | str, locale: str) -> PluralForm:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv-lv", "en_US", "ar-SA")

    Returns:
        Plural category

    Raises:
        InvalidPluralSelectorError: If n is not a valid count

    Examples:
        >>> select_plural_category(0, "lv-lv")
        <PluralForm.ZERO: 'zero'>
        >>> select_plural_category(2, "ar-sa")
        <PluralForm.TWO: 'two'>
        >>> select_plural_category(42, "ja-jp")
        <PluralForm.OTHER: 'other'>
    """
    return PluralRule(locale).classify(n)
