"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    NO_MATCH = 1
    QUERY_ERROR = 2
    FILE_ERROR = 3


class Strictness(Enum):
    """How much of the target version a candidate must share to match.

    Args:
        Enum (string): Comparison strictness levels.
    """

    EXACT = "exact"
    IGNORE_PATCH = "ignore_patch"
    IGNORE_MINOR = "ignore_minor"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_VERSION = "0.0.0"
    PREVIEW_VERSION = "TP"  # Safari Technology Preview and friends
    DEFAULT_IGNORE_PATCH = True
    DEFAULT_IGNORE_MINOR = False
    DEFAULT_ALLOW_HIGHER_VERSIONS = False
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "BROWSERGATE_LOG_LEVEL"
    ENV_BROWSERSLIST_CMD = "BROWSERGATE_BROWSERSLIST_CMD"
    BROWSERSLIST_CMD = "npx --yes browserslist"
    QUERY_TIMEOUT_SEC = 60
    CONFIG_SECTION = "browsergate"
    DEFAULT_CONFIG_FILES = [".browsergate.yml", ".browsergate.yaml"]
