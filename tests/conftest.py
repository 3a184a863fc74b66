"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Any

import pytest

from canon.registry import Registry
from canon.sources.literal import LiteralDataSource
from canon.transforms import drop_fields

ERRORS_YAML = """\
not_authorized:
  status: 401
  message: You're not authorized
  explanation: Log in, or ask an administrator for access.
not_found:
  status: 404
  message: Not found
  explanation: Nothing lives at this address.
rate_limited:
  status: 429
  message: Slow down
  explanation: Too many requests; retry after a minute.
"""


@pytest.fixture
def error_records() -> dict[str, dict[str, Any]]:
    """Declared error records, in declaration order."""
    return {
        "not_authorized": {
            "status": 401,
            "message": "You're not authorized",
            "explanation": "Log in, or ask an administrator for access.",
        },
        "not_found": {
            "status": 404,
            "message": "Not found",
            "explanation": "Nothing lives at this address.",
        },
        "rate_limited": {
            "status": 429,
            "message": "Slow down",
            "explanation": "Too many requests; retry after a minute.",
        },
    }


@pytest.fixture
def errors(error_records: dict[str, dict[str, Any]]) -> Registry:
    """Error registry that strips the HTTP status from every record."""
    return Registry(
        LiteralDataSource(error_records, label="errors"),
        drop_fields("status"),
        name="errors",
    )


@pytest.fixture
def errors_yaml(tmp_path: Path) -> Path:
    """YAML file declaring the same errors as error_records."""
    path = tmp_path / "errors.yaml"
    path.write_text(ERRORS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def manifest(tmp_path: Path, errors_yaml: Path) -> Path:
    """Manifest declaring an errors registry (status stripped) and an events registry."""
    events = tmp_path / "events.json"
    events.write_text(
        '{"signed_up": {"desc": "A user signed up", "internal": true},'
        ' "logged_in": {"desc": "A user logged in", "internal": false}}',
        encoding="utf-8",
    )
    path = tmp_path / "canon.toml"
    path.write_text(
        "[registries.errors]\n"
        f'path = "{errors_yaml.name}"\n'
        'drop_fields = ["status"]\n'
        "\n"
        "[registries.events]\n"
        'path = "events.json"\n'
        'drop_fields = ["internal"]\n'
        'rename_fields = { desc = "description" }\n',
        encoding="utf-8",
    )
    return path
