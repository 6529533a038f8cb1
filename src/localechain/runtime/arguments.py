"""Normalization of translate() call arguments.

Translator.translate() accepts up to two positional arguments after the
message id and default text. Their meaning depends on shape:

    translate(id, default)                        no count, no data
    translate(id, default, 3)                     count only
    translate(id, default, 3, {"Name": "Bob"})    count and data
    translate(id, default, {"Name": "Bob"})       data only
    translate(id, default, {"Count": 5})          count taken from data

normalize_arguments() turns them into a NormalizedArguments pair: the
plural selector and the data context handed to the message template.
A fresh data context is built on every call; caller-supplied mappings
are copied, never mutated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from localechain.constants import COUNT_FIELD, MAX_TRANSLATE_ARGS
from localechain.diagnostics import Diagnostic, DiagnosticCode, TooManyArgumentsError

if TYPE_CHECKING:
    from localechain.localization.types import DataContext

__all__ = [
    "NormalizedArguments",
    "is_plural_count",
    "normalize_arguments",
    "to_data_context",
]


@dataclass(frozen=True, slots=True)
class NormalizedArguments:
    """Per-call plural selector and data context.

    Attributes:
        selector: Plural count, or None when no count was supplied
        data: Data context for the template, or None when absent
    """

    selector: object = None
    data: DataContext | None = None


def is_plural_count(value: object) -> bool:
    """Return True if value is a count-like argument.

    Integers (bool excluded), Decimals and strings are counts; strings are
    validated later by the locale's plural rule. Floats are not counts:
    their textual form (and therefore CLDR operands) is ambiguous.
    """
    match value:
        case bool():
            return False
        case int() | Decimal() | str():
            return True
        case _:
            return False


@functools.singledispatch
def to_data_context(value: object) -> DataContext | None:
    """Convert a structured value into a data context mapping.

    Built-in conversions:
        - Mapping: shallow copy with string keys
        - dataclass instance: public (non-underscore) fields
        - named tuple: public fields

    Values are taken as-is; nested structures are not converted.
    Anything else converts to None, which callers treat as absent.

    Applications register converters for their own record types:

        >>> @to_data_context.register
        ... def _(value: User) -> dict[str, object]:
        ...     return {"Name": value.display_name}

    Args:
        value: Value supplied as translate() data

    Returns:
        New mapping from field name to value, or None
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return {k: v for k, v in value._asdict().items() if not k.startswith("_")}
    return None


@to_data_context.register(Mapping)
def _mapping_to_data_context(value: Mapping[object, object]) -> DataContext:
    return {str(k): v for k, v in value.items()}


def normalize_arguments(args: Sequence[object]) -> NormalizedArguments:
    """Classify translate() arguments into selector and data context.

    Rules:
        1. A count-like first argument is the selector; a second argument
           is the base data. Otherwise the first argument is the data and
           any second argument is ignored.
        2. With a selector, data is converted to a mapping (empty if absent
           or not convertible) and "Count" is set to the selector.
        3. Without a selector, a "Count" field in the data is adopted as the
           selector and left in place.

    Args:
        args: Positional arguments passed after id and default

    Returns:
        NormalizedArguments for this call

    Raises:
        TooManyArgumentsError: If more than two arguments are supplied
    """
    if len(args) > MAX_TRANSLATE_ARGS:
        diagnostic = Diagnostic(
            code=DiagnosticCode.TOO_MANY_ARGUMENTS,
            message=(
                f"translate() takes at most {MAX_TRANSLATE_ARGS} arguments "
                f"after id and default ({len(args)} given)"
            ),
            hint="Pass the count first and put all other values in one mapping",
        )
        raise TooManyArgumentsError(diagnostic)

    selector: object = None
    base: object = None
    match args:
        case [first, *rest] if is_plural_count(first):
            selector = first
            base = rest[0] if rest else None
        case [first, *_]:
            base = first

    data = to_data_context(base) if base is not None else None

    if selector is not None:
        if data is None:
            data = {}
        data[COUNT_FIELD] = selector
    elif data is not None and COUNT_FIELD in data:
        selector = data[COUNT_FIELD]

    return NormalizedArguments(selector=selector, data=data)
