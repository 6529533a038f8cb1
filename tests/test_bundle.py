"""Tests for runtime/bundle.py: in-memory messages and plural rules."""

from __future__ import annotations

import logging
import threading

import pytest

from localechain.diagnostics import TemplateError
from localechain.enums import PluralForm
from localechain.runtime.bundle import Bundle
from localechain.runtime.messages import PluralMessage, SimpleMessage
from localechain.runtime.plural_rules import PluralRule


class AlwaysFew:
    def classify(self, selector: object) -> PluralForm:  # noqa: ARG002
        return PluralForm.FEW


class TestAddMessages:
    """Test message registration."""

    def test_string_becomes_simple_message(self) -> None:
        """Template strings are wrapped in SimpleMessage."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"hello": "Hello"})
        messages = bundle.get_messages("en-us")
        assert messages is not None
        assert messages["hello"] == SimpleMessage("Hello")

    def test_mapping_becomes_plural_message(self) -> None:
        """Plural mappings are wrapped in PluralMessage."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"files": {"one": "a file", "other": "files"}})
        messages = bundle.get_messages("en-us")
        assert messages is not None
        assert isinstance(messages["files"], PluralMessage)

    def test_add_message_single(self) -> None:
        """add_message registers one message."""
        bundle = Bundle()
        bundle.add_message("de-de", "hello", "Hallo")
        assert bundle.has_message("de-de", "hello")

    def test_merge_and_replace(self) -> None:
        """Later additions merge with and override earlier ones."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A", "b": "B"})
        bundle.add_messages("en-us", {"b": "B2", "c": "C"})
        messages = bundle.get_messages("en-us")
        assert messages is not None
        assert dict(messages) == {
            "a": SimpleMessage("A"),
            "b": SimpleMessage("B2"),
            "c": SimpleMessage("C"),
        }

    def test_locale_normalized(self) -> None:
        """Locale keys are trimmed and lower-cased on write and read."""
        bundle = Bundle()
        bundle.add_messages(" en-US ", {"a": "A"})
        assert bundle.locales == ("en-us",)
        assert bundle.get_messages("EN-us") is not None

    def test_separators_distinguish_locales(self) -> None:
        """en-us and en_us are different locales."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A"})
        assert bundle.get_messages("en_us") is None

    def test_empty_locale_rejected(self) -> None:
        """Empty locale tags raise ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Bundle().add_messages("  ", {"a": "A"})

    def test_bad_value_leaves_bundle_unchanged(self) -> None:
        """A failing conversion publishes nothing."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A"})
        with pytest.raises(TemplateError):
            bundle.add_messages("en-us", {"b": "B", "c": "{oops"})
        assert not bundle.has_message("en-us", "b")

    def test_unsupported_value(self) -> None:
        """Unsupported message values raise TypeError."""
        with pytest.raises(TypeError):
            Bundle().add_messages("en-us", {"n": 42})

    def test_mapping_is_read_only(self) -> None:
        """Readers cannot mutate the published mapping."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A"})
        messages = bundle.get_messages("en-us")
        with pytest.raises(TypeError):
            messages["b"] = SimpleMessage("B")  # type: ignore[index]

    def test_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Additions are logged."""
        with caplog.at_level(logging.DEBUG, logger="localechain.runtime.bundle"):
            Bundle().add_messages("en-us", {"a": "A"})
        assert "Added 1 message(s) for locale 'en-us'" in caplog.text
        assert "Registered message: en-us/a" in caplog.text


class TestPluralRules:
    """Test plural rule registration."""

    def test_auto_registered(self) -> None:
        """A CLDR rule is registered with the first messages of a locale."""
        bundle = Bundle()
        bundle.add_messages("ru-ru", {"a": "A"})
        rule = bundle.get_plural_rule("ru-ru")
        assert isinstance(rule, PluralRule)
        assert rule.classify(3) == PluralForm.FEW

    def test_auto_registration_disabled(self) -> None:
        """auto_plural_rules=False leaves rules to the caller."""
        bundle = Bundle(auto_plural_rules=False)
        bundle.add_messages("ru-ru", {"a": "A"})
        assert bundle.get_plural_rule("ru-ru") is None

    def test_explicit_rule_kept(self) -> None:
        """Adding messages does not replace an explicit rule."""
        bundle = Bundle()
        rule = AlwaysFew()
        bundle.add_plural_rule("en-us", rule)
        bundle.add_messages("en-us", {"a": "A"})
        assert bundle.get_plural_rule("en-us") is rule

    def test_explicit_rule_replaces(self) -> None:
        """add_plural_rule replaces an existing rule."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A"})
        rule = AlwaysFew()
        bundle.add_plural_rule("EN-US", rule)
        assert bundle.get_plural_rule("en-us") is rule

    def test_rule_without_messages(self) -> None:
        """Rules can exist for locales without messages."""
        bundle = Bundle()
        bundle.add_plural_rule("fr-fr", AlwaysFew())
        assert bundle.get_messages("fr-fr") is None
        assert bundle.locales == ()


class TestLookups:
    """Test read accessors."""

    def test_missing_locale(self) -> None:
        """Unknown locales return None."""
        bundle = Bundle()
        assert bundle.get_messages("en-us") is None
        assert bundle.get_plural_rule("en-us") is None
        assert not bundle.has_message("en-us", "a")

    def test_repr(self) -> None:
        """repr lists locales."""
        bundle = Bundle()
        bundle.add_messages("en-us", {"a": "A"})
        assert repr(bundle) == "Bundle(locales=('en-us',))"


class TestConcurrency:
    """Concurrent writers never lose messages."""

    def test_parallel_additions(self) -> None:
        """Messages added from many threads are all present."""
        bundle = Bundle()

        def worker(n: int) -> None:
            for i in range(50):
                bundle.add_message("en-us", f"msg-{n}-{i}", f"text {i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        messages = bundle.get_messages("en-us")
        assert messages is not None
        assert len(messages) == 8 * 50
