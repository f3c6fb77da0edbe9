# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0

"""Signup form - a complete form built with FormBuilder.

Usage (REPL):
    >>> from examples.forms.signup_form import build_signup_form
    >>> html = build_signup_form(errors=['Email already registered'])
    >>> html.startswith("<div class='formbuilder-errors'>")
    True
"""

from __future__ import annotations

from genro_form import FormBuilder, FormMethod, InputType, render_form_errors

COUNTRIES = {'it': 'Italy', 'fr': 'France', 'de': 'Germany'}


def build_signup_form(errors: list[str] | None = None, country: str | None = None) -> str:
    """Return the error box (if any) followed by the signup form."""
    form = (
        FormBuilder({'id': 'signup'}, autocomplete='off')
        .set_method(FormMethod.POST)
        .set_action('/signup')
        .add_heading(2, 'Create your account')
        .add_container(class_='row')
        .add_input('email', InputType.EMAIL, {'placeholder': 'you@example.com'}, required='required')
        .add_input('password', InputType.PASSWORD, required='required')
        .close_container()
        .add_select('country', COUNTRIES, country)
        .add_radio_buttons('plan', 'free:Free,pro:Pro', 'free')
        .add_checkbox('tos', 'yes', 'I accept the terms')
        .add_text_area('notes', attrs={'rows': 4})
        .add_divider()
        .add_button('submit', 'Sign up', type='submit')
    )
    return render_form_errors(errors) + form.get_form()


if __name__ == '__main__':
    print(build_signup_form(country='it'))
