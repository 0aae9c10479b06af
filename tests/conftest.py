"""
Shared test configuration and fixtures.

Settings are read when app.core.config is first imported, so the database
location is pinned here before any test module imports the app.
"""

import os
import tempfile
from typing import Any
from unittest.mock import MagicMock

import pytest

_TEST_DB_DIR = tempfile.mkdtemp(prefix="portal-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TEST_DB_DIR, 'activity.db')}")
os.environ.setdefault("API_DOCUMENTATION_URL", "https://api-documentation.example.com")
os.environ.setdefault("THIRD_PARTY_DEVELOPER_URL", "https://third-party-developer.example.com")

from app.schemas.api_schemas import ExtendedAPIDefinition  # noqa: E402


def availability(access: str, logged_in: bool = False, authorised: bool = True, enabled: bool = True) -> dict:
    return {
        "endpointsEnabled": enabled,
        "access": {"type": access},
        "loggedIn": logged_in,
        "authorised": authorised,
    }


def extended_api_definition_json(name: str = "Calendar", overrides: dict | None = None) -> dict[str, Any]:
    """Catalog payload with a public 1.0 and a private 2.0, as api-documentation serves it."""
    versions = {
        "1.0": availability("PUBLIC", logged_in=False, authorised=True),
        "2.0": availability("PRIVATE", logged_in=False, authorised=False),
    }
    versions.update(overrides or {})
    return {
        "name": name,
        "description": "Test API",
        "context": "test",
        "serviceBaseUrl": "http://test",
        "serviceName": "calendar",
        "requiresTrust": False,
        "isTestSupport": False,
        "versions": [
            {
                "version": version,
                "status": "STABLE",
                "endpoints": [
                    {
                        "uriPattern": "/hello",
                        "endpointName": "Say Hello",
                        "method": "GET",
                        "authType": "NONE",
                        "throttlingTier": "UNLIMITED",
                    }
                ],
                "productionAvailability": prod,
            }
            for version, prod in versions.items()
        ],
    }


def extended_api_definition(name: str = "Calendar", overrides: dict | None = None) -> ExtendedAPIDefinition:
    return ExtendedAPIDefinition.model_validate(extended_api_definition_json(name, overrides))


def fake_response(status_code: int = 200, json_body: Any = None, content: bytes = b"",
                  headers: dict | None = None, url: str = "https://upstream.example.com") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_body
    response.content = content
    response.headers = headers or {}
    response.url = url
    return response


@pytest.fixture
def session_json() -> dict[str, Any]:
    return {
        "sessionId": "abc-123",
        "developer": {"email": "dev@example.com", "firstName": "Ada", "lastName": "Lovelace"},
    }
