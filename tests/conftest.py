"""
Shared test fixtures and sample inputs for simple-nem12 tests.

Inputs are written to ``tmp_path`` by the ``write_nem12`` fixture, which
returns the path of the written file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------
SINGLE_METER_SAMPLE = """\
100
200,1234567890,KWH
300,20230101,15.5,A
300,20230102,10.2,E
900
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def write_nem12(tmp_path: Path):
    """Factory: write *content* to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "input.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def single_meter_file(write_nem12) -> Path:
    """The one-meter, two-volume sample written to disk."""
    return write_nem12(SINGLE_METER_SAMPLE)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (parses whole files end to end)",
    )
