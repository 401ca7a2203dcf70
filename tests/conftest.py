"""Pytest configuration and fixtures."""

import logging
import os

import pytest
from typer.testing import CliRunner

from hekaya.config import reset_settings

ARABIC_SCRIPT = """العنوان: آخر أيام الصيف
المؤلف: سمير عبدالحميد
اتجاه: يمين-لليسار

داخلي - قهوة بلدي - نهار #١#

سمير قاعد على ترابيزة في الركن.

@سمير (صوت خارجي)
(بهدوء)
قهوة سادة لو سمحت.

@نادية ^
وأنا كمان.

سمير
شكراً.

- قطع -

خارجي - الشارع - ليل
"""

ENGLISH_SCRIPT = """Title: Big Fish
Author: John August

INT. COFFEE SHOP - DAY

John sits alone.

JOHN
(quietly)
Black coffee, please.

CUT TO:

EXT. STREET - NIGHT
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings and no HEKAYA_ environment."""
    for var in [k for k in os.environ if k.startswith("HEKAYA_")]:
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reset_logging_state():
    """Restore root logger handlers and level after a test reconfigures them."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    root_logger.setLevel(original_level)
    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)


@pytest.fixture
def arabic_script():
    """A short Arabic script exercising title page, cues and transitions."""
    return ARABIC_SCRIPT


@pytest.fixture
def english_script():
    """A short Fountain script in English."""
    return ENGLISH_SCRIPT


@pytest.fixture
def runner():
    """CLI runner for invoking the hekaya app with a wide console."""
    return CliRunner(env={"COLUMNS": "200"})
