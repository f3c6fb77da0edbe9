# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from genro_form import FormBuilder


@pytest.fixture
def builder():
    """Fresh FormBuilder with no form attributes."""
    return FormBuilder()


@pytest.fixture
def options():
    """Numeric-keyed options used by select and radio tests."""
    return {1: 'A', 2: 'B'}
