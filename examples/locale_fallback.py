"""Translator Example - Locale Preference Fallback Chains.

Demonstrates real-world usage of Translator for handling incomplete
translations and Accept-Language style preference strings.

Scenarios covered:
1. Partial Latvian translations falling back to English
2. Accept-Language headers with script subtags
3. Plural forms across languages
4. Observing fallbacks with on_fallback

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from localechain import Bundle, FallbackInfo, Translator


def build_bundle() -> Bundle:
    """Create a bundle with complete English and partial Latvian/Chinese messages."""
    bundle = Bundle()
    bundle.add_messages(
        "en-us",
        {
            "welcome": "Welcome, {Name}!",
            "cart": {"one": "{Count} item in cart", "other": "{Count} items in cart"},
            "checkout": "Checkout",
        },
    )
    bundle.add_messages(
        "lv-lv",
        {
            "welcome": "Sveiki, {Name}!",
            "cart": {
                "zero": "Grozā {Count} preču",
                "one": "Grozā {Count} prece",
                "other": "Grozā {Count} preces",
            },
        },
    )
    bundle.add_messages("zh-hans", {"welcome": "欢迎，{Name}！"})
    return bundle


def example_1_basic_fallback(bundle: Bundle) -> None:
    """Example 1: Latvian first, English for anything missing."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv-LV -> en-US)")
    print("=" * 60)

    translator = Translator(bundle, "lv-LV, en-US")
    print(translator.translate("welcome", "Welcome!", {"Name": "Anna"}))
    print(translator.translate("checkout", "Checkout"))  # English
    print(translator.translate("missing", "Default text"))  # default
    print()


def example_2_accept_language(bundle: Bundle) -> None:
    """Example 2: Accept-Language header with a script subtag."""
    print("=" * 60)
    print("Example 2: Accept-Language Header")
    print("=" * 60)

    translator = Translator(bundle, "zh-Hans-CN,zh;q=0.9,en-US;q=0.8")
    print(f"Candidates: {translator.language_tags}")
    print(translator.translate("welcome", "Welcome!", {"Name": "李雷"}))  # zh-hans
    print(translator.translate("cart", "Cart", 2))  # en-us
    print()


@dataclass
class Shopper:
    Name: str
    Count: int


def example_3_plurals(bundle: Bundle) -> None:
    """Example 3: Counts as arguments, in mappings, or in records."""
    print("=" * 60)
    print("Example 3: Plural Forms")
    print("=" * 60)

    translator = Translator(bundle, "lv-LV")
    for count in (0, 1, 2, 21):
        print(translator.translate("cart", "Cart", count))
    print(translator.translate("cart", "Cart", {"Count": 11}))
    print(translator.translate("cart", "Cart", Shopper("Anna", 1)))
    print(translator.translate("cart", "Cart", "lots"))  # [ERR][cart] ...
    print()


def example_4_on_fallback(bundle: Bundle) -> None:
    """Example 4: Report messages that are missing in the primary locale."""
    print("=" * 60)
    print("Example 4: Fallback Monitoring")
    print("=" * 60)

    def report(info: FallbackInfo) -> None:
        print(
            f"  [fallback] {info.message_id}: {info.requested_locale} -> "
            f"{info.resolved_locale}"
        )

    translator = Translator(bundle, "lv-LV, en-US", on_fallback=report)
    print(translator.translate("checkout", "Checkout"))
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    shared = build_bundle()
    example_1_basic_fallback(shared)
    example_2_accept_language(shared)
    example_3_plurals(shared)
    example_4_on_fallback(shared)
