"""
Display helper
==============

Human-readable rendering of arbitrary values. Objects that define their own
string conversion render through it; everything else goes through a JSON dump
that skips already-visited references, so cyclic structures never recurse.
"""

from __future__ import annotations

import json
import typing
from collections.abc import Mapping
from dataclasses import dataclass

_OMIT = object()

_JSON_SCALARS = (str, int, float, bool)


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Rendering configuration for `to_string_helper`."""

    quote_strings: bool = True

    @classmethod
    def quoted(cls) -> DisplayOptions:
        """Strings render as 'text'."""
        return cls(quote_strings=True)

    @classmethod
    def raw(cls) -> DisplayOptions:
        """Strings render verbatim (map keys and values)."""
        return cls(quote_strings=False)


def has_custom_str(obj: object) -> bool:
    cls = type(obj)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def to_string_helper(obj: object, options: DisplayOptions = DisplayOptions()) -> str:
    """
    Render any value as a string.

    Example:
        to_string_helper(["a", 1])                      # "['a',1]"
        to_string_helper("a", DisplayOptions.raw())     # "a"
    """
    return _render(obj, options, set())


def _render(obj: object, options: DisplayOptions, seen: set[int]) -> str:
    if isinstance(obj, list | tuple):
        # a list already on the current path renders as [...], like list.__repr__
        if id(obj) in seen:
            return "[...]"
        seen.add(id(obj))
        body = ",".join(_render(o, options, seen) for o in obj)
        seen.discard(id(obj))
        return "[" + body + "]"
    if isinstance(obj, str):
        return f"'{obj}'" if options.quote_strings else obj
    if obj is None or has_custom_str(obj):
        return str(obj)
    return json.dumps(_dump(obj, set()), separators=(",", ":"))


def _dump(value: object, seen: set[int]) -> typing.Any:
    """Build a JSON-compatible tree, omitting references seen before."""
    if value is None or isinstance(value, _JSON_SCALARS):
        return value
    if id(value) in seen:
        return _OMIT
    seen.add(id(value))

    if isinstance(value, Mapping):
        mapping = typing.cast(Mapping[typing.Any, typing.Any], value)
        return _dump_fields(((str(k), v) for k, v in mapping.items()), seen)
    if isinstance(value, list | tuple | set | frozenset):
        items: list[typing.Any] = []
        for item in typing.cast(typing.Iterable[typing.Any], value):
            dumped = _dump(item, seen)
            items.append(None if dumped is _OMIT else dumped)
        return items
    if has_custom_str(value):
        return str(value)
    return _dump_fields(_fields_of(value), seen)


def _dump_fields(
    fields: typing.Iterable[tuple[str, typing.Any]],
    seen: set[int],
) -> dict[str, typing.Any]:
    out: dict[str, typing.Any] = {}
    for key, field_value in fields:
        dumped = _dump(field_value, seen)
        if dumped is not _OMIT:
            out[key] = dumped
    return out


def _fields_of(value: object) -> list[tuple[str, typing.Any]]:
    if hasattr(value, "__dict__"):
        return list(vars(value).items())
    fields: list[tuple[str, typing.Any]] = []
    for cls in type(value).__mro__:
        slots = getattr(cls, "__slots__", ())
        for slot in (slots,) if isinstance(slots, str) else slots:
            if hasattr(value, slot):
                fields.append((slot, getattr(value, slot)))
    return fields


__all__ = ("DisplayOptions", "has_custom_str", "to_string_helper")
