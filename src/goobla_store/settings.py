"""
Settings and configuration for the goobla model store.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables at resolver construction time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .storage.errors import StoreRootUnavailable

__all__ = ["Settings", "create_settings_from_env", "MODELS_ENV_VAR"]

MODELS_ENV_VAR = "GOOBLA_MODELS"


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the model store.

    Store Settings:
        models_dir: Base directory holding ``manifests/`` and ``blobs/``
    """
    models_dir: Path

    def __post_init__(self):
        """Validate settings on construction."""
        if self.models_dir is None or self.models_dir == "":
            raise ValueError("models_dir is required")

        # Normalise str input so callers can pass either
        if not isinstance(self.models_dir, Path):
            object.__setattr__(self, "models_dir", Path(self.models_dir))


# Settings loading functions (no caching)


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - GOOBLA_MODELS (optional): models directory; ``~`` is expanded

    When GOOBLA_MODELS is unset or empty the models directory defaults to
    ``<home>/.goobla/models``.

    Returns:
        Settings object with validated configuration

    Raises:
        StoreRootUnavailable: If no models directory is configured and the
            home directory cannot be determined

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    return Settings(models_dir=_models_dir_from_env())


def _models_dir_from_env() -> Path:
    """Internal implementation of models directory resolution."""
    configured = os.getenv(MODELS_ENV_VAR)
    if configured:
        return Path(configured).expanduser()

    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise StoreRootUnavailable(f"cannot determine home directory for models: {e}") from e

    return home / ".goobla" / "models"
