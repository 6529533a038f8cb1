"""Translatable message types.

Templates use str.format named fields resolved against the data context:

    "{Count} items in {Name}'s cart"

Templates are validated when the message is created, so a malformed
template fails at load time instead of during translate(). Fields missing
from the data context render as "{Field}".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from localechain.constants import FALLBACK_MISSING_FIELD
from localechain.diagnostics import Diagnostic, DiagnosticCode, TemplateError
from localechain.enums import PluralForm

if TYPE_CHECKING:
    from localechain.localization.types import TranslatableMessage

__all__ = [
    "PluralMessage",
    "SimpleMessage",
    "message_from_value",
    "render_template",
    "validate_template",
]

logger = logging.getLogger(__name__)

_FORMATTER = string.Formatter()


class _FieldValues(dict[str, object]):
    """Data context view that renders missing fields as placeholders."""

    def __missing__(self, key: str) -> str:
        return FALLBACK_MISSING_FIELD.format(name=key)


def validate_template(template: str) -> None:
    """Check that template can be rendered with named fields.

    Raises:
        TemplateError: If braces are unbalanced or a field is positional
    """
    try:
        fields = [name for _, name, _, _ in _FORMATTER.parse(template) if name is not None]
    except ValueError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.TEMPLATE_MALFORMED,
            message=f"Malformed template {template!r}: {e}",
            hint="Escape literal braces as '{{' and '}}'",
        )
        raise TemplateError(diagnostic) from e

    for name in fields:
        # "{}" and "{0}" index positional arguments, which templates never get
        root = name.split(".", 1)[0].split("[", 1)[0]
        if not root or root.isdigit():
            diagnostic = Diagnostic(
                code=DiagnosticCode.TEMPLATE_POSITIONAL_FIELD,
                message=f"Positional field in template {template!r}",
                hint="Name every field, e.g. '{Count}'",
            )
            raise TemplateError(diagnostic)


def render_template(template: str, data: Mapping[str, object] | None) -> str:
    """Render a validated template against a data context.

    Attribute and index lookups on field values ("{User.name}") that fail
    are logged and yield an empty string, which callers treat as
    "no content".
    """
    values = _FieldValues(data or {})
    try:
        return template.format_map(values)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        logger.warning("Failed to render template %r: %s", template, e)
        return ""


@dataclass(frozen=True, slots=True)
class SimpleMessage:
    """Message with a single template used for every plural form.

    Example:
        >>> SimpleMessage("Hello, {Name}!").render(PluralForm.OTHER, {"Name": "Anna"})
        'Hello, Anna!'
    """

    template: str

    def __post_init__(self) -> None:
        validate_template(self.template)

    def render(self, form: PluralForm, data: Mapping[str, object] | None) -> str:  # noqa: ARG002
        return render_template(self.template, data)


@dataclass(frozen=True, slots=True)
class PluralMessage:
    """Message with one template per plural form.

    A form without a template renders as an empty string, so the
    Translator moves on to the next candidate locale.

    Example:
        >>> msg = PluralMessage({"one": "{Count} file", "other": "{Count} files"})
        >>> msg.render(PluralForm.OTHER, {"Count": 3})
        '3 files'

    Attributes:
        templates: Template per plural form (keys accept form names)
    """

    templates: Mapping[PluralForm, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize keys to PluralForm and validate every template.

        Raises:
            ValueError: If a key is not a CLDR plural category
            TemplateError: If a template is malformed
        """
        templates: dict[PluralForm, str] = {}
        for key, template in self.templates.items():
            try:
                form = PluralForm(key)
            except ValueError:
                valid = ", ".join(f.value for f in PluralForm)
                msg = f"Unknown plural form {key!r}; expected one of: {valid}"
                raise ValueError(msg) from None
            validate_template(template)
            templates[form] = template
        object.__setattr__(self, "templates", templates)

    def render(self, form: PluralForm, data: Mapping[str, object] | None) -> str:
        template = self.templates.get(form)
        if template is None:
            return ""
        return render_template(template, data)


def message_from_value(value: object) -> TranslatableMessage:
    """Build a message from a catalog value.

    Args:
        value: Template string, mapping of plural form to template, or
            an object that already has a render() method

    Returns:
        SimpleMessage, PluralMessage, or value itself

    Raises:
        TypeError: If value has none of the accepted shapes
        TemplateError: If a template is malformed
    """
    match value:
        case str():
            return SimpleMessage(value)
        case Mapping():
            return PluralMessage(value)
        case _ if callable(getattr(value, "render", None)):
            return value  # type: ignore[return-value]
        case _:
            msg = f"Expected template string, plural mapping or message, got {type(value).__name__}"
            raise TypeError(msg)
