"""Data models for browser identity and comparison options."""

import logging
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from ..constants import Constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedBrowser:
    """Browser family and normalized version inferred from a User-Agent."""
    family: str
    version: str


@dataclass(frozen=True)
class BrowserTarget:
    """One browser version a compatibility query asks to support."""
    family: str
    version: str


# camelCase spellings accepted from JS-style option objects
_OPTION_ALIASES = {
    "ignoreMinor": "ignore_minor",
    "ignorePatch": "ignore_patch",
    "allowHigherVersions": "allow_higher_versions",
}


def option_name(key: str) -> str:
    """Return the snake_case option name for ``key``."""
    return _OPTION_ALIASES.get(key, key)


@dataclass
class ComparisonOptions:
    """Match options: comparison strictness plus query-engine pass-through fields."""
    ignore_minor: bool = Constants.DEFAULT_IGNORE_MINOR
    ignore_patch: bool = Constants.DEFAULT_IGNORE_PATCH
    allow_higher_versions: bool = Constants.DEFAULT_ALLOW_HIGHER_VERSIONS
    browsers: Optional[List[str]] = None
    env: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ComparisonOptions":
        """Build options from a mapping, accepting snake_case or camelCase keys.

        Keys that are absent keep their defaults, so caller-supplied values
        always win over the built-in ones. Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            name = option_name(key)
            if name not in known:
                logger.debug("Ignoring unknown option %r", key)
                continue
            values[name] = value
        if isinstance(values.get("browsers"), str):
            values["browsers"] = [values["browsers"]]
        return cls(**values)
