"""Tests for configuration system."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sitecontent.config import (
    ContentConfig,
    LocaleConfig,
    ValidationConfig,
    load_config,
)


class TestLocaleConfig:
    """Tests for LocaleConfig."""

    def test_defaults(self) -> None:
        """Test default locales."""
        config = LocaleConfig()
        assert config.default == "en"
        assert config.supported == ("en", "de")
        assert config.names["de"] == "Deutsch"

    def test_default_must_be_supported(self) -> None:
        """Test that the default locale must be supported."""
        with pytest.raises(ValidationError, match="not in supported locales"):
            LocaleConfig(default="fr", supported=("en", "de"))

    def test_empty_supported(self) -> None:
        """Test that at least one locale is required."""
        with pytest.raises(ValidationError, match="At least one"):
            LocaleConfig(default="en", supported=())


class TestContentConfig:
    """Tests for ContentConfig."""

    def test_defaults(self) -> None:
        """Test default settings."""
        config = ContentConfig()
        assert config.validation.strict_links is False
        assert config.logging.level == "INFO"
        assert ".yaml" in config.validation.file_suffixes

    def test_collection_dir(self, tmp_path: Path) -> None:
        """Test collection directories live under content_root."""
        config = ContentConfig(content_root=tmp_path)
        assert config.collection_dir("hero") == tmp_path / "hero"

    def test_frozen(self) -> None:
        """Test that config is immutable."""
        config = ContentConfig()
        with pytest.raises(ValidationError):
            config.content_root = Path("/elsewhere")  # type: ignore[misc]


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_minimal_config(self, tmp_path: Path) -> None:
        """Test that an empty file yields defaults."""
        config_path = tmp_path / "site.yaml"
        config_path.write_text("", encoding="utf-8")

        config = load_config(config_path)
        assert config.content_root == tmp_path / "src/content"
        assert config.locales == LocaleConfig()
        assert config.validation == ValidationConfig()

    def test_relative_content_root(self, tmp_path: Path) -> None:
        """Test content_root resolves against the config directory."""
        config_path = tmp_path / "site.yaml"
        config_path.write_text("content_root: content\n", encoding="utf-8")

        config = load_config(config_path)
        assert config.content_root == tmp_path / "content"

    def test_absolute_content_root(self, tmp_path: Path) -> None:
        """Test absolute content_root is kept."""
        root = tmp_path / "abs"
        config_path = tmp_path / "site.yaml"
        config_path.write_text(f"content_root: {root}\n", encoding="utf-8")

        assert load_config(config_path).content_root == root

    def test_env_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} and ${VAR:default} interpolation."""
        monkeypatch.setenv("SITE_LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("SITE_STRICT_LINKS", raising=False)
        config_path = tmp_path / "site.yaml"
        config_path.write_text(
            "logging:\n"
            "  level: ${SITE_LOG_LEVEL}\n"
            "validation:\n"
            "  strict_links: ${SITE_STRICT_LINKS:true}\n",
            encoding="utf-8",
        )

        config = load_config(config_path)
        assert config.logging.level == "DEBUG"
        assert config.validation.strict_links is True

    def test_base_inheritance(self, tmp_path: Path) -> None:
        """Test sibling base.yaml is merged under the main config."""
        (tmp_path / "base.yaml").write_text(
            "locales:\n"
            "  default: de\n"
            "  supported: [de, en]\n"
            "validation:\n"
            "  strict_links: true\n",
            encoding="utf-8",
        )
        config_path = tmp_path / "site.yaml"
        config_path.write_text("validation:\n  strict_links: false\n", encoding="utf-8")

        config = load_config(config_path)
        assert config.locales.default == "de"
        assert config.locales.supported == ("de", "en")
        assert config.validation.strict_links is False

    def test_explicit_base_path(self, tmp_path: Path) -> None:
        """Test an explicit base config path."""
        base_path = tmp_path / "defaults.yaml"
        base_path.write_text("logging:\n  json_output: true\n", encoding="utf-8")
        config_path = tmp_path / "site.yaml"
        config_path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")

        config = load_config(config_path, base_path=base_path)
        assert config.logging.json_output is True
        assert config.logging.level == "WARNING"

    def test_non_mapping_config(self, tmp_path: Path) -> None:
        """Test that a list at the top level is rejected."""
        config_path = tmp_path / "site.yaml"
        config_path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(config_path)

    def test_invalid_bool(self, tmp_path: Path) -> None:
        """Test that unparseable booleans are rejected."""
        config_path = tmp_path / "site.yaml"
        config_path.write_text("validation:\n  strict_links: sometimes\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Cannot parse boolean"):
            load_config(config_path)
