"""Root pytest configuration for goobla-store tests."""
import pytest

from goobla_store.settings import Settings
from goobla_store.storage.resolver import PathResolver

HEX = "a" * 64
DIGEST = f"sha256:{HEX}"
CANONICAL_DIGEST = f"sha256-{HEX}"


# Keep every test away from the real home directory
@pytest.fixture(autouse=True)
def test_env(monkeypatch, tmp_path):
    """Automatically point GOOBLA_MODELS at a per-test directory."""
    monkeypatch.setenv("GOOBLA_MODELS", str(tmp_path / "env-models"))


# Standardized test fixtures
@pytest.fixture
def models_dir(tmp_path):
    """Models directory for injected settings (not created up front)."""
    return tmp_path / "models"


@pytest.fixture
def settings(models_dir):
    """Standard test settings."""
    return Settings(models_dir=models_dir)


@pytest.fixture
def resolver(settings):
    """Path resolver bound to the test models directory."""
    return PathResolver(settings)
