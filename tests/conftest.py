"""
Pytest configuration for reportpdf
"""

import logging
import re
import sys
from datetime import datetime, timezone

import pytest

from reportpdf import PdfDoc


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def fixed_date():
    """Deterministic creation date for byte-level comparisons."""
    return datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_doc(fixed_date):
    """Factory for builders with a fixed creation date."""
    def _make(**kwargs):
        kwargs.setdefault("creation_date", fixed_date)
        return PdfDoc(**kwargs)
    return _make


XREF_ENTRY = re.compile(rb"(\d{10}) (\d{5}) ([nf]) \n")


def parse_xref(data: bytes):
    """Return (xref offset, [(offset, generation, flag), ...]) for a produced buffer."""
    startxref = int(data.rsplit(b"startxref\n", 1)[1].split(b"\n", 1)[0])
    section = data[startxref:data.index(b"trailer\n", startxref)]
    entries = [(int(o), int(g), f.decode()) for o, g, f in XREF_ENTRY.findall(section)]
    return startxref, entries


@pytest.fixture
def xref():
    return parse_xref


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
