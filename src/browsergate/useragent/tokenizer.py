"""Adapter from ua-parser results to browser/os/engine name-version triples.

ua-parser reports browser and OS but not the rendering engine, so the engine
is read from the well-known engine tokens of the User-Agent itself.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

import ua_parser

# ua-parser's family for anything it does not recognise
_UNKNOWN_FAMILY = "Other"

# Checked in order: Edge (legacy) and Blink UAs also carry AppleWebKit.
_ENGINE_PATTERNS = (
    ("EdgeHTML", re.compile(r"Edge/([\w.]+)", re.IGNORECASE)),
    ("Blink", re.compile(r"AppleWebKit/537\.36.+Chrome/(?!27\.)([\w.]+)", re.IGNORECASE)),
    ("Presto", re.compile(r"Presto/([\w.]+)", re.IGNORECASE)),
    ("Trident", re.compile(r"Trident/([\w.]+)", re.IGNORECASE)),
    ("WebKit", re.compile(r"AppleWebKit/([\w.]+)", re.IGNORECASE)),
    ("Gecko", re.compile(r"rv:([\w.]+).+Gecko/\d+", re.IGNORECASE)),
)


@dataclass(frozen=True)
class NameVersion:
    """A name and version pair; either may be absent."""
    name: Optional[str] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class TokenizedUserAgent:
    """Raw browser, OS and engine identity extracted from a User-Agent."""
    browser: NameVersion = field(default_factory=NameVersion)
    os: NameVersion = field(default_factory=NameVersion)
    engine: NameVersion = field(default_factory=NameVersion)


def _join_version(*parts: Optional[str]) -> Optional[str]:
    """Join the leading present components with dots."""
    present = []
    for part in parts:
        if not part:
            break
        present.append(part)
    return ".".join(present) or None


def _family(value: Optional[str]) -> Optional[str]:
    if not value or value == _UNKNOWN_FAMILY:
        return None
    return value


def detect_engine(ua_string: str) -> NameVersion:
    """Detect the rendering engine name and version from engine tokens."""
    for name, pattern in _ENGINE_PATTERNS:
        match = pattern.search(ua_string)
        if match:
            return NameVersion(name, match.group(1))
    return NameVersion()


def tokenize(ua_string: str) -> TokenizedUserAgent:
    """Tokenize a User-Agent string into browser, OS and engine identities.

    Args:
        ua_string: Raw User-Agent header value.

    Returns:
        TokenizedUserAgent: Any field may be empty when not recognised.
    """
    result = ua_parser.parse(ua_string)

    browser = NameVersion()
    if result.user_agent is not None:
        ua = result.user_agent
        family = _family(ua.family)
        if family:
            browser = NameVersion(family, _join_version(ua.major, ua.minor, ua.patch, ua.patch_minor))

    os_ = NameVersion()
    if result.os is not None:
        family = _family(result.os.family)
        if family:
            os_ = NameVersion(
                family,
                _join_version(result.os.major, result.os.minor, result.os.patch, result.os.patch_minor),
            )

    return TokenizedUserAgent(browser=browser, os=os_, engine=detect_engine(ua_string))
