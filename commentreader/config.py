"""Global configuration: file names, env keys, defaults."""

from pathlib import Path

# Project-level settings directory and file
SETTINGS_DIR = Path(".commentreader")
SETTINGS_FILE = "config.json"

# Environment file names read / written by SettingsManager
ENV_FILE = ".env"
ENV_TEMPLATE_FILE = ".env.example"

# Prefix shared by every environment variable this package reads
ENV_PREFIX = "COMMENTREADER_"

# Document version used when nothing else is configured
DEFAULT_DOCUMENT_VERSION = "V1"

# Root logger name for the package
LOGGER_NAME = "commentreader"
