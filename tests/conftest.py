# Shared test fixtures. Qt runs on the offscreen platform so view tests (which
# use the pytest-qt `qtbot` fixture) work headless.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from domain.models import RawLocationRecord  # noqa: E402


@pytest.fixture
def raw_rows():
    return [
        RawLocationRecord(location="Leipzig", month=3, year=2023, total=40),
        RawLocationRecord(location="Berlin", month=1, year=2024, total=12),
        RawLocationRecord(location="leipzig", month=7, year=2022, total=40),
        RawLocationRecord(location="Dresden", month=11, year=2023, total=7.5),
        RawLocationRecord(location="Berlin", month=6, year=2024, total=12),
    ]
