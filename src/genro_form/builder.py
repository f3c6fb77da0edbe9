# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""FormBuilder - fluent builder for HTML forms.

The builder keeps an append-only list of rendered fragments. Every ``add_*``
method renders exactly one fragment, appends it and returns the builder
itself, so calls can be chained. Rendering never mutates the builder.

Example:
    Building a login form::

        from genro_form import FormBuilder, FormMethod, InputType

        form = (
            FormBuilder({'id': 'login'})
            .set_method(FormMethod.POST)
            .set_action('/login')
            .add_input('user')
            .add_input('password', InputType.PASSWORD)
            .add_button('go', 'Sign in', type='submit')
        )
        html = form.get_form()

Values and attributes are interpolated verbatim: the caller is responsible
for escaping anything that comes from untrusted input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .attributes import merge_attrs, open_tag, render_attrs
from .enums import FormMethod, InputType
from .options import OptionsSpec, is_selected, normalize_options

logger = logging.getLogger(__name__)

FORM_CLASS = "formbuilder"
ERRORS_CLASS = "formbuilder-errors"


class FormBuilder:
    """Accumulates form fields and renders them as an HTML form.

    Args:
        attrs: Attributes of the ``<form>`` element itself, rendered after
            method, action and class.
        **kwargs: Further form attributes (``class_`` -> ``class``).

    Attributes:
        method: Current form method (default ``FormMethod.GET``).
        action: Current action URL (default empty string).
    """

    def __init__(self, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._fields: list[str] = []
        self._method = FormMethod.GET
        self._action = ""
        self._form_attrs = merge_attrs(attrs, **kwargs)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def method(self) -> FormMethod:
        return self._method

    @property
    def action(self) -> str:
        return self._action

    @property
    def fields(self) -> tuple[str, ...]:
        """Snapshot of the rendered fragments in insertion order."""
        return tuple(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __str__(self) -> str:
        return self.get_form()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} method={self._method.value!r} "
            f"action={self._action!r} fields={len(self._fields)}>"
        )

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_method(self, method: FormMethod | str) -> FormBuilder:
        """Set the form method.

        Args:
            method: A FormMethod member or its name as a string ('post').

        Raises:
            ValueError: If ``method`` is not a known HTTP form method.
        """
        self._method = FormMethod.coerce(method)
        logger.debug("form method set to %s", self._method.value)
        return self

    def set_action(self, action: str) -> FormBuilder:
        """Set the URL the form is submitted to. The value is not validated."""
        self._action = action
        logger.debug("form action set to %r", action)
        return self

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def _append(self, fragment: str) -> FormBuilder:
        self._fields.append(fragment)
        logger.debug("appended fragment #%d: %s", len(self._fields), fragment)
        return self

    def add_input(
        self,
        name: str,
        type: InputType | str = InputType.TEXT,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add an ``<input>`` field.

        Args:
            name: Field name.
            type: An InputType member or its attribute string ('email').
            attrs: Extra attributes in rendering order.

        Raises:
            ValueError: If ``type`` is not a known input type.
        """
        input_type = InputType.coerce(type)
        return self._append(
            open_tag(
                "input",
                ("type", input_type.value),
                ("name", name),
                attrs=merge_attrs(attrs, **kwargs),
            )
        )

    def add_text_area(
        self,
        name: str,
        value: str = "",
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add a ``<textarea>``; ``value`` becomes its raw text content."""
        tag = open_tag("textarea", ("name", name), attrs=merge_attrs(attrs, **kwargs))
        return self._append(f"{tag}{value}</textarea>")

    def add_button(
        self,
        name: str,
        value: str,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add a ``<button>`` whose content is ``value``."""
        tag = open_tag("button", ("name", name), attrs=merge_attrs(attrs, **kwargs))
        return self._append(f"{tag}{value}</button>")

    def add_select(
        self,
        name: str,
        options: OptionsSpec = None,
        selected_value: Any = None,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add a ``<select>`` with one ``<option>`` per entry of ``options``.

        The option whose value equals ``selected_value`` (compared as strings)
        gets the ``selected`` flag; None compares as ''. ``attrs`` apply to
        the select element.
        """
        parts = [open_tag("select", ("name", name), attrs=merge_attrs(attrs, **kwargs))]
        for value, label in normalize_options(options):
            flag = [("selected", None)] if is_selected(value, selected_value) else []
            parts.append(f"{open_tag('option', ('value', value), *flag)}{label}</option>")
        parts.append("</select>")
        return self._append("".join(parts))

    def add_radio_buttons(
        self,
        name: str,
        options: OptionsSpec = None,
        selected_value: Any = None,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add a group of labelled radio inputs as a single fragment.

        ``attrs`` are repeated on every radio input. The radio whose value
        equals ``selected_value`` (compared as strings) is checked.
        """
        radio_attrs = merge_attrs(attrs, **kwargs)
        parts = []
        for value, label in normalize_options(options):
            flag = [("checked", None)] if is_selected(value, selected_value) else []
            tag = open_tag(
                "input",
                ("type", InputType.RADIO.value),
                ("name", name),
                ("value", value),
                *flag,
                attrs=radio_attrs,
            )
            parts.append(f"<label>{tag} {label}</label>")
        return self._append("".join(parts))

    def add_checkbox(
        self,
        name: str,
        value: str,
        label: str,
        is_checked: bool = False,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add a labelled checkbox."""
        flag = [("checked", None)] if is_checked else []
        tag = open_tag(
            "input",
            ("type", InputType.CHECKBOX.value),
            ("name", name),
            ("value", value),
            *flag,
            attrs=merge_attrs(attrs, **kwargs),
        )
        return self._append(f"<label>{tag} {label}</label>")

    def add_divider(self, size: int = 1) -> FormBuilder:
        """Add a horizontal rule."""
        return self._append(open_tag("hr", ("size", size)))

    def add_heading(
        self,
        level: int,
        text: str,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> FormBuilder:
        """Add an ``<h{level}>`` heading. ``level`` is not range checked."""
        tag = f"h{level}"
        return self._append(f"{open_tag(tag, attrs=merge_attrs(attrs, **kwargs))}{text}</{tag}>")

    def add_container(self, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> FormBuilder:
        """Open a ``<div>``. Close it with close_container()."""
        return self._append(open_tag("div", attrs=merge_attrs(attrs, **kwargs)))

    def close_container(self) -> FormBuilder:
        """Close the last opened ``<div>``. Balancing is up to the caller."""
        return self._append("</div>")

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def get_form(self) -> str:
        """Return the complete ``<form>`` element with all fields."""
        tag = open_tag(
            "form",
            ("method", self._method.value),
            ("action", self._action),
            ("class", FORM_CLASS),
            attrs=self._form_attrs,
        )
        logger.debug("rendering form with %d fragments", len(self._fields))
        return f"{tag}{self.get_form_fields()}</form>"

    def get_form_fields(self) -> str:
        """Return the fields only, to embed in a form managed elsewhere."""
        return "".join(self._fields)

    @staticmethod
    def render_form_errors(
        errors: Iterable[str] | None = None,
        attrs: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> str:
        """Render a list of form errors.

        A single string counts as one error. Returns an empty string when
        there are no errors, otherwise::

            <div class='formbuilder-errors' ...><ul><li>error</li>...</ul></div>
        """
        if isinstance(errors, str):
            errors = [errors]
        errors = list(errors or [])
        if not errors:
            return ""
        items = "".join(f"<li>{error}</li>" for error in errors)
        extra = render_attrs(merge_attrs(attrs, **kwargs))
        return f"<div class='{ERRORS_CLASS}'{extra}><ul>{items}</ul></div>"


render_form_errors = FormBuilder.render_form_errors
