"""SettingsManager — environment profiles and project generation settings."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from commentreader.config import (
    DEFAULT_DOCUMENT_VERSION,
    ENV_FILE,
    ENV_PREFIX,
    ENV_TEMPLATE_FILE,
    LOGGER_NAME,
    SETTINGS_DIR,
    SETTINGS_FILE,
)
from commentreader.filters.config import FilterConfig
from commentreader.generation.config import GeneratorConfig
from commentreader.generation.loader import load_generator_config

logger = logging.getLogger(__name__)

ENV_KEY = f"{ENV_PREFIX}ENV"
LOG_LEVEL_KEY = f"{ENV_PREFIX}LOG_LEVEL"
DOCUMENT_VERSION_KEY = f"{ENV_PREFIX}DOCUMENT_VERSION"
ANNOTATION_XML_KEY = f"{ENV_PREFIX}ANNOTATION_XML"
ASSEMBLIES_KEY = f"{ENV_PREFIX}ASSEMBLIES"
ADVANCED_CONFIG_KEY = f"{ENV_PREFIX}ADVANCED_CONFIG"

# All known settings keys with defaults
_SETTINGS_KEYS: dict[str, dict[str, Any]] = {
    ENV_KEY: {"default": "development", "description": "Environment profile"},
    LOG_LEVEL_KEY: {"default": "INFO", "description": "Logging level"},
    DOCUMENT_VERSION_KEY: {
        "default": DEFAULT_DOCUMENT_VERSION,
        "description": "Version of the generated OpenAPI document",
    },
    ANNOTATION_XML_KEY: {
        "default": [],
        "description": "Annotation XML files (os.pathsep separated)",
    },
    ASSEMBLIES_KEY: {
        "default": [],
        "description": "Assemblies to reflect into (os.pathsep separated)",
    },
    ADVANCED_CONFIG_KEY: {"default": "", "description": "Advanced configuration XML file"},
}

# Keys holding a list of paths
_LIST_KEYS = frozenset({ANNOTATION_XML_KEY, ASSEMBLIES_KEY})

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        ENV_KEY: "development",
        LOG_LEVEL_KEY: "DEBUG",
    },
    "production": {
        ENV_KEY: "production",
        LOG_LEVEL_KEY: "WARNING",
    },
    "testing": {
        ENV_KEY: "testing",
        LOG_LEVEL_KEY: "DEBUG",
    },
}


def _coerce(key: str, value: Any) -> Any:
    """Normalise a raw value: lists for path-list keys, str otherwise."""
    if key in _LIST_KEYS:
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return [part.strip() for part in str(value).split(os.pathsep) if part.strip()]
    return str(value)


def _render(value: Any) -> str:
    """Inverse of :func:`_coerce` for writing ``KEY=value`` lines."""
    if isinstance(value, (list, tuple)):
        return os.pathsep.join(str(v) for v in value)
    return str(value)


class SettingsManager:
    """Manage generation settings across environments."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` documenting every settings key.

        Path lists are written ``os.pathsep`` separated, the form
        :meth:`load_settings` reads back.  Returns the written path.
        """
        header = (
            "# commentreader settings\n"
            f"# Profiles ({ENV_KEY}): {', '.join(_PROFILES)}\n"
            f"# Path lists are separated by {os.pathsep!r}\n"
        )
        blocks = [
            f"# {info['description']}\n{key}={_render(info['default'])}\n"
            for key, info in _SETTINGS_KEYS.items()
        ]

        env_path = Path(project_path) / ENV_TEMPLATE_FILE
        env_path.write_text("\n".join([header, *blocks]), encoding="utf-8")
        return env_path

    def load_settings(self, project_path: str | Path) -> dict[str, Any]:
        """Load merged settings: defaults -> profile -> config.json -> .env -> env vars.

        Path-list keys hold lists of strings; every other key holds a str.
        """
        root = Path(project_path)
        settings: dict[str, Any] = {}

        # 1. Defaults
        for key, info in _SETTINGS_KEYS.items():
            settings[key] = _coerce(key, info["default"])

        # 2. Profile overrides
        env_name = os.environ.get(ENV_KEY, settings[ENV_KEY])
        settings.update(_PROFILES.get(env_name, {}))

        # 3. .commentreader/config.json
        config_json = root / SETTINGS_DIR / SETTINGS_FILE
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                # null leaves the lower layer's value in place
                settings.update(
                    {k: _coerce(k, v) for k, v in data.items() if v is not None}
                )
            except (ValueError, OSError, AttributeError):
                logger.debug("Could not read %s", config_json, exc_info=True)

        # 4. .env file
        env_file = root / ENV_FILE
        if env_file.is_file():
            try:
                lines = env_file.read_text(encoding="utf-8").splitlines()
            except (ValueError, OSError):
                logger.debug("Could not read %s", env_file, exc_info=True)
                lines = []
            for line in lines:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    k, v = line.split("=", 1)
                    settings[k.strip()] = _coerce(k.strip(), v.strip())

        # 5. Environment variables override all
        for key in _SETTINGS_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                settings[key] = _coerce(key, env_val)

        return settings

    def build_generator_config(
        self,
        project_path: str | Path,
        filter_config: FilterConfig | None = None,
    ) -> GeneratorConfig:
        """Load settings for *project_path* and build a GeneratorConfig.

        Relative file paths are resolved against the project root.
        """
        root = Path(project_path)
        settings = self.load_settings(root)

        def resolve(path: str) -> Path:
            p = Path(path)
            return p if p.is_absolute() else root / p

        advanced = settings.get(ADVANCED_CONFIG_KEY) or None
        return load_generator_config(
            [resolve(p) for p in settings[ANNOTATION_XML_KEY]],
            [resolve(p) for p in settings[ASSEMBLIES_KEY]],
            settings[DOCUMENT_VERSION_KEY],
            filter_config=filter_config,
            advanced_config_path=resolve(advanced) if advanced else None,
        )

    @staticmethod
    def apply_log_level(settings: dict[str, Any]) -> None:
        """Set the package logger level from merged settings."""
        level = str(settings.get(LOG_LEVEL_KEY, "INFO")).upper()
        logging.getLogger(LOGGER_NAME).setLevel(level)
