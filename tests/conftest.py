"""Shared test fixtures and path setup."""
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add project root to sys.path so tests can import api.*, upstream.*, schemas.*
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app
from upstream.afad import AfadClient

UPSTREAM_URL = "https://afad.test/apiv2/event/filter"


@pytest.fixture
def afad_events():
    """Two events shaped like the AFAD filter endpoint returns them."""
    return [
        {
            "rms": "0.45",
            "eventID": "640321",
            "location": "Sindirgi (Balikesir)",
            "latitude": "39.2105",
            "longitude": "28.1677",
            "depth": "7.0",
            "type": "ML",
            "magnitude": "3.1",
            "country": "Türkiye",
            "province": "Balikesir",
            "district": "Sindirgi",
            "neighborhood": "Yayla",
            "date": "2024-01-01T12:30:45",
            "isEventUpdate": False,
            "lastUpdateDate": None,
        },
        {
            "rms": "0.61",
            "eventID": "640320",
            "location": "Ege Denizi",
            "latitude": "38.9012",
            "longitude": "26.0441",
            "depth": "11.24",
            "type": "ML",
            "magnitude": "2.4",
            "country": "Yunanistan",
            "province": None,
            "district": None,
            "neighborhood": None,
            "date": "2024-01-01T09:05:00",
            "isEventUpdate": True,
            "lastUpdateDate": "2024-01-01T09:20:00",
        },
    ]


def make_response(status_code=200, body=b"[]"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = body
    return resp


@pytest.fixture
def session():
    """requests.Session stand-in; tests set session.get.return_value."""
    s = MagicMock()
    s.headers = {}
    s.get.return_value = make_response(200, b"[]")
    return s


@pytest.fixture
def afad_client(session):
    return AfadClient(UPSTREAM_URL, timeout=5.0, session=session)


@pytest.fixture
def settings():
    return Settings(api_url=UPSTREAM_URL, open_browser=False)


@pytest.fixture
def client(settings, afad_client):
    app = create_app(settings, client=afad_client)
    return TestClient(app)


@pytest.fixture
def respond(session):
    """Make the stubbed upstream answer with the given status and payload."""
    def _respond(payload=None, status_code=200, raw=None):
        body = raw if raw is not None else json.dumps(payload).encode("utf-8")
        session.get.return_value = make_response(status_code, body)
        return session
    return _respond
