"""Tests for pydantic models and pydantic-settings integration."""

import pytest
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from wirebox.container import Container, SignatureInspector
from wirebox.exceptions import UnresolvableParameterError
from wirebox.integrations.pydantic_settings import ContainerSettings, is_pydantic_settings_subclass


class Database(BaseModel):
    url: str = "sqlite://"


class Service(BaseModel):
    db: Database
    retries: int = 3


class Credentials(BaseModel):
    username: str


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WIREBOX_TEST_APP_")

    name: str = "app"
    workers: int = 1


class TestPydanticModels:
    def test_resolve_model_with_nested_model(self, container: Container) -> None:
        result = container.get(Service)

        assert isinstance(result.db, Database)
        assert result.db.url == "sqlite://"
        assert result.retries == 3

    def test_model_fields_take_positional_overrides(self, container: Container) -> None:
        result = container.get(Service, [None, 5])

        assert result.retries == 5

    def test_required_field_without_override_is_unresolvable(self, container: Container) -> None:
        with pytest.raises(UnresolvableParameterError) as exc_info:
            container.get(Credentials)

        assert exc_info.value.parameter == "username"

    def test_required_field_with_override(self, container: Container) -> None:
        assert container.get(Credentials, ["admin"]).username == "admin"


class TestBaseSettings:
    def test_settings_are_described_without_parameters(self, inspector: SignatureInspector) -> None:
        assert inspector.describe(AppSettings) == []

    def test_settings_read_from_environment(
        self,
        container: Container,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("WIREBOX_TEST_APP_NAME", "worker")
        monkeypatch.setenv("WIREBOX_TEST_APP_WORKERS", "4")

        result = container.get(AppSettings)

        assert result.name == "worker"
        assert result.workers == 4

    def test_settings_dependency_is_injected(self, container: Container) -> None:
        class Worker:
            def __init__(self, settings: AppSettings) -> None:
                self.settings = settings

        assert isinstance(container.get(Worker).settings, AppSettings)

    def test_container_settings_are_resolvable(
        self,
        container: Container,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("WIREBOX_AUTOREGISTER", "false")

        assert container.get(ContainerSettings).autoregister is False


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (AppSettings, True),
        (ContainerSettings, True),
        (Database, False),
        (AppSettings(), False),
        ("AppSettings", False),
    ],
)
def test_is_pydantic_settings_subclass(candidate: object, expected: bool) -> None:
    assert is_pydantic_settings_subclass(candidate) is expected
