import copy
import json
from pathlib import Path

import pytest

from app import create_app
from surveillance.common.data_access import DataLoader

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def unified_source() -> dict:
    return json.loads((FIXTURES_DIR / "data" / "unified-data.json").read_text(encoding="utf-8"))


@pytest.fixture()
def document(unified_source) -> dict:
    """Fresh copy of the fixture document so tests can reshape it freely."""
    return copy.deepcopy(unified_source)


@pytest.fixture()
def loader() -> DataLoader:
    return DataLoader(base_url=str(FIXTURES_DIR))


@pytest.fixture()
def app(loader):
    return create_app("testing", loader=loader)


@pytest.fixture()
def client(app):
    return app.test_client()
