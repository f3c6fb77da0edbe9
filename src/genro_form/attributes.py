# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attribute map handling shared by every renderer.

Attributes are rendered as ``name='value'`` pairs joined by a single space,
in insertion order. Nothing is escaped: names and values are interpolated
verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_attrs(attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
    """Build one ordered attribute dict from a mapping and keyword attributes.

    Mapping entries come first, in their own order, followed by keyword
    attributes. A single trailing underscore is stripped from keyword names
    so that reserved words can be passed (``class_`` -> ``class``).
    Keyword attributes set to None are skipped. A keyword repeating a
    mapping key replaces it and moves to the end.

    Args:
        attrs: Ordered mapping of attribute name to value, or None.
        **kwargs: Additional attributes.

    Returns:
        A new dict, safe to keep after the caller mutates ``attrs``.
    """
    merged: dict[str, Any] = dict(attrs) if attrs else {}
    for name, value in kwargs.items():
        if value is None:
            continue
        if name.endswith("_") and len(name) > 1:
            name = name[:-1]
        merged.pop(name, None)
        merged[name] = value
    return merged


def render_attrs(attrs: Mapping[str, Any] | None) -> str:
    """Render attributes as a string ready to follow a tag name.

    Returns an empty string for an empty or missing mapping, otherwise the
    pairs prefixed by one space::

        >>> render_attrs({'id': 'main', 'class': 'wide'})
        " id='main' class='wide'"
    """
    if not attrs:
        return ""
    return " " + " ".join(f"{k}='{v}'" for k, v in attrs.items())


def open_tag(tag: str, *pairs: tuple[str, Any], attrs: Mapping[str, Any] | None = None) -> str:
    """Render an opening tag with fixed leading attributes and an attribute map.

    ``pairs`` are the attributes the renderer always writes (name, type...),
    ``attrs`` the caller supplied ones, appended after them. A pair whose
    value is None renders as a bare flag (``checked``, ``selected``).
    """
    fixed = "".join(f" {k}" if v is None else f" {k}='{v}'" for k, v in pairs)
    return f"<{tag}{fixed}{render_attrs(attrs)}>"
