"""
Unit tests for settings, logging setup and dependency providers.
"""
import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from songpool.api import dependencies
from songpool.config import AppSettings, SerializerSettings
from songpool.logging_config import build_formatter, configure_logging
from tests.factories import SongFactory


@pytest.fixture
def clean_dependencies():
    dependencies.reset_dependencies()
    yield
    dependencies.reset_dependencies()


class TestSettings:

    def test_defaults(self):
        settings = AppSettings()
        assert settings.api_base_path == "/api/v1"
        assert settings.serializer.format == "json"
        assert settings.serializer.links_enabled is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SERIALIZER_LINKS_ENABLED", "false")
        monkeypatch.setenv("API_VERSION", "v2")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = AppSettings(serializer=SerializerSettings())

        assert settings.serializer.links_enabled is False
        assert settings.api_base_path == "/api/v2"
        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_format(self):
        with pytest.raises(ValidationError):
            AppSettings(log_format="xml")

    def test_database_url(self):
        settings = AppSettings()
        assert settings.database.url.startswith("postgresql://")


class TestLogging:

    def test_json_formatter_renders_stdlib_records(self):
        record = logging.LogRecord("songpool.db", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        payload = json.loads(build_formatter("json").format(record))

        assert payload["event"] == "hello world"
        assert payload["level"] == "info"
        assert payload["logger"] == "songpool.db"
        assert "timestamp" in payload

    def test_text_formatter_is_not_json(self):
        record = logging.LogRecord("songpool", logging.WARNING, __file__, 1, "careful", (), None)

        line = build_formatter("text").format(record)

        assert "careful" in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)

    def test_configure_logging_replaces_handler(self):
        root = logging.getLogger()
        before = len(root.handlers)
        level = root.level

        configure_logging(AppSettings(log_format="json", log_level="warning"))
        configure_logging(AppSettings(log_format="json", log_level="warning"))

        installed = [h for h in root.handlers if getattr(h, "_songpool", False)]
        assert len(installed) == 1
        assert isinstance(installed[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.WARNING
        assert len(root.handlers) == before + 1

        root.removeHandler(installed[0])
        root.setLevel(level)


class TestDependencies:

    def test_serializer_is_singleton(self, clean_dependencies):
        assert dependencies.get_serializer() is dependencies.get_serializer()

    def test_default_serializer_links(self, clean_dependencies):
        data = dependencies.get_serializer().normalize(SongFactory(id=4), "json")
        assert data["_links"]["up"]["path"] == "/api/v1/song"
        assert data["_links"]["self"]["path"] == "/api/v1/song/4"

    def test_set_route_resolver_rebuilds_serializer(self, clean_dependencies, route_table):
        first = dependencies.get_serializer()
        dependencies.set_route_resolver(route_table)

        second = dependencies.get_serializer()

        assert second is not first
        data = second.normalize(SongFactory(id=4), "json")
        assert data["_links"]["self"]["path"] == "/api/songs/4"
