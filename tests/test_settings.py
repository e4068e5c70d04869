"""
Tests for settings module.

Tests settings validation and environment variable loading.
"""
from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from goobla_store.settings import Settings, create_settings_from_env
from goobla_store.storage.errors import StoreRootUnavailable


class TestSettings:
    """Test Settings dataclass validation."""

    def test_path_settings(self):
        settings = Settings(models_dir=Path("/srv/models"))
        assert settings.models_dir == Path("/srv/models")

    def test_string_models_dir_converted(self):
        """Test that a str models_dir is normalised to Path."""
        settings = Settings(models_dir="/srv/models")  # type: ignore[arg-type]
        assert isinstance(settings.models_dir, Path)
        assert settings.models_dir == Path("/srv/models")

    def test_empty_models_dir_raises(self):
        with pytest.raises(ValueError, match="models_dir is required"):
            Settings(models_dir="")  # type: ignore[arg-type]

    def test_missing_models_dir_raises(self):
        with pytest.raises(ValueError, match="models_dir is required"):
            Settings(models_dir=None)  # type: ignore[arg-type]

    def test_settings_are_frozen(self):
        settings = Settings(models_dir=Path("/srv/models"))
        with pytest.raises(AttributeError):
            settings.models_dir = Path("/elsewhere")  # type: ignore[misc]


class TestCreateSettingsFromEnv:
    """Test creating settings from environment variables."""

    def test_explicit_models_dir(self):
        with patch.dict(os.environ, {"GOOBLA_MODELS": "/data/models"}, clear=True):
            settings = create_settings_from_env()

        assert settings.models_dir == Path("/data/models")

    def test_tilde_expanded(self):
        with patch.dict(os.environ, {"GOOBLA_MODELS": "~/models", "HOME": "/home/tester"}, clear=True):
            settings = create_settings_from_env()

        assert settings.models_dir == Path("/home/tester/models")

    def test_default_under_home(self):
        with patch.dict(os.environ, {"HOME": "/home/tester"}, clear=True):
            settings = create_settings_from_env()

        assert settings.models_dir == Path("/home/tester/.goobla/models")

    def test_empty_env_var_uses_default(self):
        with patch.dict(os.environ, {"GOOBLA_MODELS": "", "HOME": "/home/tester"}, clear=True):
            settings = create_settings_from_env()

        assert settings.models_dir == Path("/home/tester/.goobla/models")

    def test_home_unavailable_raises(self):
        """Test that an unresolvable home directory raises StoreRootUnavailable."""
        with patch.dict(os.environ, {}, clear=True), \
                patch("goobla_store.settings.Path.home", side_effect=RuntimeError("no home")):
            with pytest.raises(StoreRootUnavailable, match="cannot determine home directory"):
                create_settings_from_env()

    def test_fresh_instance_each_call(self):
        """Test that settings are not cached between calls."""
        with patch.dict(os.environ, {"GOOBLA_MODELS": "/first"}, clear=True):
            first = create_settings_from_env()
        with patch.dict(os.environ, {"GOOBLA_MODELS": "/second"}, clear=True):
            second = create_settings_from_env()

        assert first.models_dir == Path("/first")
        assert second.models_dir == Path("/second")
