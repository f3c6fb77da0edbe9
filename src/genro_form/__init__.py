# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-form: fluent builder for HTML forms.

Example:
    >>> from genro_form import FormBuilder, InputType
    >>> form = FormBuilder().add_container().add_input('x').close_container()
    >>> form.get_form_fields()
    "<div><input type='text' name='x'></div>"
"""

from genro_form.attributes import merge_attrs, render_attrs
from genro_form.builder import FormBuilder, render_form_errors
from genro_form.enums import FormMethod, InputType
from genro_form.options import normalize_options, parse_options_string

__version__ = "0.1.0"

__all__ = [
    "FormBuilder",
    "FormMethod",
    "InputType",
    "render_form_errors",
    "merge_attrs",
    "render_attrs",
    "normalize_options",
    "parse_options_string",
]
