"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    DEFAULT_CORRELATION_HEADERS,
    BaseSettings,
    FirestoreSettings,
    RedisSettings,
    ServiceInstanceStoreSettings,
    SlackSettings,
    TiamSettings,
    get_base_settings,
    get_relay_settings,
    get_service_instance_store_settings,
    get_slack_settings,
    get_tiam_settings,
)

_CACHED_GETTERS = (
    get_base_settings,
    get_relay_settings,
    get_service_instance_store_settings,
    get_slack_settings,
    get_tiam_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


class TestBaseSettings:
    """ENVIRONMENT, LOG_LEVEL e afins."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.is_development
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert not settings.is_development
        assert settings.log_level == "DEBUG"

    def test_empty_service_name_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]


class TestSlackSettings:
    """Cliente chat.postMessage."""

    def test_post_message_endpoint(self) -> None:
        settings = SlackSettings(api_base_url="https://slack.test/api/")

        assert settings.post_message_endpoint == "https://slack.test/api/chat.postMessage"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_REQUEST_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("SLACK_ICON_URL", "https://icons.test/relay.png")

        settings = get_slack_settings()

        assert settings.request_timeout_seconds == 2.5
        assert settings.icon_url == "https://icons.test/relay.png"

    def test_invalid_timeout(self) -> None:
        assert SlackSettings(request_timeout_seconds=0).validate() == [
            "SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0"
        ]


class TestTiamSettings:
    """Introspecção de credenciais."""

    def test_requires_url(self) -> None:
        assert "TIAM_URL não configurado" in TiamSettings().validate()

    def test_introspect_endpoint(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIAM_URL", "https://tiam.test/")

        settings = get_tiam_settings()

        assert settings.introspect_endpoint == "https://tiam.test/identity/v1/introspect"
        assert settings.service_id == "slack"
        assert settings.validate() == []


class TestRelaySettings:
    """Sources genéricos e headers de correlation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RELAY_GENERIC_SOURCES", raising=False)
        monkeypatch.delenv("RELAY_CORRELATION_HEADERS", raising=False)

        settings = get_relay_settings()

        assert settings.generic_sources == frozenset()
        assert settings.correlation_headers == DEFAULT_CORRELATION_HEADERS

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELAY_GENERIC_SOURCES", "jenkins, travis,,")
        monkeypatch.setenv("RELAY_CORRELATION_HEADERS", "X-Request-Id")

        settings = get_relay_settings()

        assert settings.generic_sources == frozenset({"jenkins", "travis"})
        assert settings.correlation_headers == ("x-request-id",)


class TestServiceInstanceStoreSettings:
    """Seleção do backend."""

    def test_memory_default_in_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("SERVICE_INSTANCE_STORE_BACKEND", raising=False)

        assert get_service_instance_store_settings().backend == "memory"

    def test_firestore_default_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("SERVICE_INSTANCE_STORE_BACKEND", raising=False)

        assert get_service_instance_store_settings().backend == "firestore"

    def test_invalid_backend(self) -> None:
        errors = ServiceInstanceStoreSettings(backend="postgres").validate()

        assert errors == ["SERVICE_INSTANCE_STORE_BACKEND inválido: postgres"]

    def test_seed_only_with_memory(self) -> None:
        errors = ServiceInstanceStoreSettings(backend="redis", seed_file="seed.yaml").validate()

        assert errors == ["SERVICE_INSTANCE_SEED_FILE só é suportado com backend memory"]

    def test_redis_requires_url(self) -> None:
        assert RedisSettings().validate() == ["REDIS_URL não configurado"]

    def test_firestore_uses_gcp_project_fallback(self) -> None:
        assert FirestoreSettings().validate("my-project") == []
        assert FirestoreSettings().validate("") == [
            "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
        ]
