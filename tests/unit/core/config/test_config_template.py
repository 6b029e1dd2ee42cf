"""Tests for config.yaml templating and loading."""

from pathlib import Path

import pytest
from pydantic import SecretStr

from src.bookstore.runtime.config.config_data import ConfigData, DatabaseConfig
from src.bookstore.runtime.config.config_template import (
    load_config_or_default,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("BOOKSTORE_TEST_VAR", raising=False)

        assert substitute_env_vars("x: ${BOOKSTORE_TEST_VAR:-fallback}") == "x: fallback"

    def test_value_wins_over_default(self, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_TEST_VAR", "value")

        assert substitute_env_vars("x: ${BOOKSTORE_TEST_VAR:-fallback}") == "x: value"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("BOOKSTORE_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="BOOKSTORE_TEST_VAR"):
            substitute_env_vars("x: ${BOOKSTORE_TEST_VAR}")

    def test_required_variable_custom_message(self, monkeypatch):
        monkeypatch.delenv("BOOKSTORE_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="set me please"):
            substitute_env_vars("x: ${BOOKSTORE_TEST_VAR:?set me please}")

    def test_text_without_placeholders_unchanged(self):
        assert substitute_env_vars("plain: text") == "plain: text"


class TestLoadTemplatedYaml:
    def test_loads_sections(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_TEST_KEY", "file-signing-key-0123456789-abcdefghijkl")
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  app:\n"
            "    environment: production\n"
            "    port: 9000\n"
            "  jwt:\n"
            "    signing_key: ${BOOKSTORE_TEST_KEY}\n"
            "    expires_minutes: 10\n"
            "  security:\n"
            "    admin_role: Admin\n"
        )

        config = load_templated_yaml(path)

        assert config.app.environment == "production"
        assert config.app.port == 9000
        assert isinstance(config.jwt.signing_key, SecretStr)
        assert config.jwt.signing_key.get_secret_value() == "file-signing-key-0123456789-abcdefghijkl"
        assert config.jwt.expires_minutes == 10
        assert config.security.admin_role == "Admin"
        assert config.database.url == DatabaseConfig().url

    def test_environment_prefixed_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        monkeypatch.setenv("PRODUCTION_BOOKSTORE_TEST_PORT", "9443")
        monkeypatch.setenv("BOOKSTORE_TEST_PORT", "1")
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: ${BOOKSTORE_TEST_PORT:-8000}\n")

        assert load_templated_yaml(path).app.port == 9443

    def test_values_with_yaml_syntax_kept_whole(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_TEST_URL", "sqlite:///:memory:")
        monkeypatch.setenv("BOOKSTORE_TEST_KEY", "k3y-part-one #and-the-rest-of-the-secret")
        monkeypatch.delenv("BOOKSTORE_TEST_ROUNDS", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  database:\n"
            '    url: "${BOOKSTORE_TEST_URL:-sqlite:///./bookstore.db}"\n'
            "  jwt:\n"
            '    signing_key: "${BOOKSTORE_TEST_KEY:-unused}"\n'
            "  security:\n"
            '    bcrypt_rounds: "${BOOKSTORE_TEST_ROUNDS:-6}"\n'
        )

        config = load_templated_yaml(path)

        assert config.database.url == "sqlite:///:memory:"
        assert config.jwt.signing_key.get_secret_value() == "k3y-part-one #and-the-rest-of-the-secret"
        assert config.security.bcrypt_rounds == 6

    def test_shipped_config_loads_with_memory_database(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
        monkeypatch.setenv("APP_PORT", "8123")
        path = Path(__file__).resolve().parents[4] / "config.yaml"

        config = load_templated_yaml(path)

        assert config.database.url == "sqlite:///:memory:"
        assert config.app.port == 8123
        assert config.security.admin_role == "Administrator"
        assert [user.username for user in config.seed.users] == [
            "admin@bookstore.com",
            "customer@gmail.com",
        ]

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="parsing YAML"):
            load_templated_yaml(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  jwt:\n    expires_minutes: 0\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = load_config_or_default(tmp_path / "absent.yaml")

        assert config == ConfigData()
        assert config.jwt.expires_minutes == 5
        assert config.security.admin_role == "Administrator"


class TestDatabaseConfig:
    def test_sqlite_url_used_as_is(self):
        config = DatabaseConfig(url="sqlite:///./bookstore.db")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./bookstore.db"

    def test_password_injected_from_file(self, tmp_path):
        secret = tmp_path / "db_password"
        secret.write_text("s3cret\n")
        config = DatabaseConfig(
            url="postgresql://bookstore@db:5432/bookstore", password_file=str(secret)
        )

        assert config.connection_string == "postgresql://bookstore:s3cret@db:5432/bookstore"

    def test_password_injected_from_environment(self, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_TEST_DB_PASSWORD", "envpass")
        config = DatabaseConfig(
            url="postgresql://bookstore@db:5432/bookstore",
            password_env_var="BOOKSTORE_TEST_DB_PASSWORD",
        )

        assert config.connection_string == "postgresql://bookstore:envpass@db:5432/bookstore"

    def test_missing_password_variable(self, monkeypatch):
        monkeypatch.delenv("BOOKSTORE_TEST_DB_PASSWORD", raising=False)
        config = DatabaseConfig(
            url="postgresql://bookstore@db:5432/bookstore",
            password_env_var="BOOKSTORE_TEST_DB_PASSWORD",
        )

        with pytest.raises(ValueError, match="not set"):
            _ = config.connection_string
