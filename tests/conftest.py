"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.nonprofit_directory.models import Organization  # noqa: E402
from src.nonprofit_directory.processing.ingestion import RecordIngestor  # noqa: E402


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def nonprofits_file(fixtures_dir):
    """Path of the sample nonprofits export."""
    return fixtures_dir / "nonprofits.json"


@pytest.fixture(scope="session")
def nonprofit_rows(nonprofits_file):
    """Load raw sample rows from fixtures."""
    with open(nonprofits_file) as f:
        return json.load(f)


@pytest.fixture
def organizations(nonprofit_rows):
    """Sample rows ingested into Organization records."""
    return RecordIngestor().ingest(nonprofit_rows)


@pytest.fixture
def make_org():
    """Factory for minimal Organization records."""
    def _make(org_id, name=None, **kwargs):
        return Organization(id=org_id, name=name if name is not None else f"Org {org_id}", **kwargs)
    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring datastore access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
