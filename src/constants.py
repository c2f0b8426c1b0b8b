"""Constants used in the project."""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_INPUT = 1
    CONNECTION_ERROR = 2


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SERVER_NAME = "py-dep-licenses-mcp-server"
    SERVER_VERSION = "1.0.0"
    TOOL_NAME = "list_dependencies"
    USER_AGENT = "MCP-Dependencies-Tool/1.0.0"

    REGISTRY_URL_PYPI = "https://pypi.org/pypi/"
    GITHUB_RAW_BASE = "https://raw.githubusercontent.com"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"

    PRIMARY_BRANCH = "main"
    FALLBACK_BRANCH = "master"

    MANIFEST_REQUEST_TIMEOUT = 10  # seconds
    METADATA_REQUEST_TIMEOUT = 5  # seconds

    LICENSE_BATCH_SIZE = 5
    LICENSE_BATCH_DELAY_SEC = 0.2
    LICENSE_MAX_LENGTH = 50

    # Appended to the built-in license tables, see analysis.license_classifier
    EXTRA_FREE_LICENSES: Dict[str, str] = {}
    EXTRA_PAID_LICENSES: Dict[str, str] = {}

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PYDEPLICENSES_LOG_LEVEL"
    ENV_CONFIG = "PYDEPLICENSES_CONFIG"
    DEFAULT_CONFIG_PATHS = (
        "pydeplicenses.yml",
        os.path.join("~", ".config", "pydeplicenses", "config.yml"),
    )


def _config_candidates(explicit_path: Optional[str]) -> list:
    if explicit_path:
        return [explicit_path]
    paths = []
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path:
        paths.append(env_path)
    paths.extend(os.path.expanduser(p) for p in Constants.DEFAULT_CONFIG_PATHS)
    return paths


def load_yaml_config(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the first YAML config file found.

    Search order: explicit path, $PYDEPLICENSES_CONFIG, ./pydeplicenses.yml,
    ~/.config/pydeplicenses/config.yml. Returns an empty dict when nothing is
    found or the file cannot be parsed.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    for path in _config_candidates(explicit_path):
        if not os.path.isfile(path):
            if explicit_path:
                logger.warning("Config file not found: %s", path)
            continue
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", path)
            return {}
        logger.debug("Loaded config from %s", path)
        return data
    return {}
