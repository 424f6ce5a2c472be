"""
Pytest configuration for daftarhadir
"""

import logging
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

from daftarhadir import AttendanceRequest, DateRange


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def sample_request():
    """Two weeks of January 2024 (starts on a Monday) with New Year as holiday."""
    return AttendanceRequest(
        kategori_tlh="Administrasi",
        unit="Bagian Pengembangan Produk TI",
        direktorat="Direktorat Pusat Teknologi Informasi",
        periode="Januari 2024",
        nama="Budi Santoso",
        date_range=DateRange(start=date(2024, 1, 1), end=date(2024, 1, 14)),
        holidays={date(2024, 1, 1)},
        date_sign=date(2024, 1, 31),
    )


@pytest.fixture
def sample_payload():
    """The same request as submitted by the web form."""
    return {
        "kategoriTLH": "Administrasi",
        "unit": "Bagian Pengembangan Produk TI",
        "direktorat": "Direktorat Pusat Teknologi Informasi",
        "periode": "Januari 2024",
        "nama": "Budi Santoso",
        "dateRange": {"from": "2024-01-01", "to": "2024-01-14"},
        "holidays": ["2024-01-01"],
        "dateSign": "2024-01-31",
    }


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False
