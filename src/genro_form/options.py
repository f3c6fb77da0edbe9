# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Normalization of option collections for selects and radio groups.

Options can be given as:
    - a mapping value -> label: ``{'M': 'Male', 'F': 'Female'}``
    - an iterable of ``(value, label)`` pairs
    - an iterable of bare values, each used as its own label
    - a compact string ``'M:Male,F:Female'``; commas can be escaped as ``\\,``
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from genro_toolbox import smartsplit

OptionsSpec = Mapping[Any, Any] | Iterable[Any] | str | None


def parse_options_string(spec: str) -> list[tuple[str, str]]:
    """Parse a ``'value:label,value:label'`` string into pairs.

    An item without ``:`` is its own label. Empty items are skipped.
    """
    result: list[tuple[str, str]] = []
    for item in smartsplit(spec, ","):
        item = item.strip()
        if not item:
            continue
        item = item.replace("\\,", ",")
        value, sep, label = item.partition(":")
        result.append((value, label if sep else value))
    return result


def normalize_options(options: OptionsSpec) -> list[tuple[Any, Any]]:
    """Return options as an ordered list of ``(value, label)`` pairs."""
    if not options:
        return []
    if isinstance(options, str):
        return parse_options_string(options)
    if isinstance(options, Mapping):
        return list(options.items())
    result: list[tuple[Any, Any]] = []
    for item in options:
        if isinstance(item, tuple) and len(item) == 2:
            result.append(item)
        else:
            result.append((item, item))
    return result


def is_selected(value: Any, selected_value: Any) -> bool:
    """Compare an option value with the selected one as strings.

    None compares as the empty string, so with nothing selected an
    option whose value is '' (a "Choose..." placeholder) is marked.
    """
    if selected_value is None:
        selected_value = ""
    return str(value) == str(selected_value)
