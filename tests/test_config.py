from __future__ import annotations

import dataclasses

import pytest

from elsa_sdk.auth import authorization_value
from elsa_sdk.config import ClientOptions
from elsa_sdk.errors import ConfigurationError


def test_from_env_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELSA_BASE_URL", "https://workflows.example.com/elsa/api")
    monkeypatch.setenv("ELSA_API_KEY", "k-123")
    monkeypatch.setenv("ELSA_TIMEOUT", "12.5")
    monkeypatch.setenv("ELSA_AUTH_SCHEME", "Bearer")

    options = ClientOptions.from_env()

    assert options.base_address == "https://workflows.example.com/elsa/api"
    assert options.credential == "k-123"
    assert options.timeout == 12.5
    assert options.auth_scheme == "Bearer"


def test_from_env_treats_empty_key_as_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ELSA_BASE_URL", raising=False)
    monkeypatch.setenv("ELSA_API_KEY", "")

    options = ClientOptions.from_env()

    assert options.credential is None
    assert options.base_address == "http://localhost:5001/elsa/api"


def test_from_env_rejects_non_numeric_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELSA_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="ELSA_TIMEOUT") as excinfo:
        ClientOptions.from_env()

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_options_are_frozen() -> None:
    options = ClientOptions(base_address="http://elsa.test")
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.base_address = "http://other.test"  # type: ignore[misc]


def test_authorization_value() -> None:
    assert authorization_value("abc") == "ApiKey abc"
    assert authorization_value("abc", "Bearer") == "Bearer abc"
    assert authorization_value("abc", "") == "abc"


def test_headers_are_read_only_and_detached() -> None:
    source = {"X-Tenant": "acme"}
    options = ClientOptions(base_address="http://elsa.test", headers=source)

    source["X-Tenant"] = "other"
    with pytest.raises(TypeError):
        options.headers["X-Extra"] = "1"  # type: ignore[index]

    assert dict(options.headers) == {"X-Tenant": "acme"}
