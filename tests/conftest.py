from __future__ import annotations

import io

import pytest


@pytest.fixture
def out() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def progress() -> io.StringIO:
    return io.StringIO()
