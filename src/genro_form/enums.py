# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Closed vocabularies for form methods and input types.

Both enumerations carry the exact string written into the rendered markup
as their value, so ``FormMethod.POST.value == 'post'`` and
``InputType.DATETIME_LOCAL.value == 'datetime-local'``.
"""

from __future__ import annotations

from enum import Enum


class FormMethod(str, Enum):
    """HTTP method of a ``<form>`` element."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"

    @classmethod
    def coerce(cls, value: FormMethod | str) -> FormMethod:
        """Return the member for ``value``, accepting members or wire strings.

        Strings are matched case-insensitively ('POST' and 'post' both work).

        Raises:
            ValueError: If ``value`` is not one of the known methods.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid form method {value!r}, expected one of: {allowed}")


class InputType(str, Enum):
    """Value of the ``type`` attribute of an ``<input>`` element."""

    TEXT = "text"
    PASSWORD = "password"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    EMAIL = "email"
    URL = "url"
    FILE = "file"
    COLOR = "color"
    RANGE = "range"
    HIDDEN = "hidden"
    SUBMIT = "submit"
    RESET = "reset"
    IMAGE = "image"
    MONTH = "month"
    WEEK = "week"
    DATETIME = "datetime"
    DATETIME_LOCAL = "datetime-local"
    SEARCH = "search"
    TEL = "tel"

    @classmethod
    def coerce(cls, value: InputType | str) -> InputType:
        """Return the member for ``value``, accepting members or attribute strings.

        Raises:
            ValueError: If ``value`` is not one of the known input types.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid input type {value!r}, expected one of: {allowed}")
