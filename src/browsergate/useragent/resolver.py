"""Resolve a User-Agent string to a canonical browser family and version.

Resolution is an ordered list of rules; the first rule whose predicate holds
produces the result, and a browser no rule claims is kept as reported.
Rules overlap, so their order is significant.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List

from ..common.logging_utils import is_debug_enabled
from ..constants import Constants
from ..versioning.models import ResolvedBrowser
from ..versioning.parser import normalize_version
from .tokenizer import TokenizedUserAgent, tokenize

logger = logging.getLogger(__name__)

# (pattern, count) pairs; count 0 replaces every occurrence.
_MASQUERADE_PATTERNS = (
    # Chrome and Opera on iOS render through the system WebView; without their
    # tokens the UA reads as the underlying Mobile Safari.
    (re.compile(r"(CriOS|OPiOS)/\d+\.\d+\.\d+\.\d+"), 1),
    # Yandex Browser runs on Chromium
    (re.compile(r"YaBrowser/(\d+\.?)+"), 0),
    # Facebook in-app browser
    (re.compile(r"FB_IAB"), 0),
    (re.compile(r"FBAN/FBIOS"), 0),
)

_CHROME_VARIANTS = ("Chrome Mobile", "Chrome WebView", "Chromium", "Chrome Headless", "HeadlessChrome")


@dataclass(frozen=True)
class ResolutionRule:
    """A predicate and the resolution it yields when the predicate holds."""
    name: str
    applies: Callable[[TokenizedUserAgent], bool]
    resolve: Callable[[TokenizedUserAgent], ResolvedBrowser]


def strip_masquerading(ua_string: str) -> str:
    """Remove tokens by which embedded browsers impersonate their host engine."""
    stripped = ua_string
    for pattern, count in _MASQUERADE_PATTERNS:
        stripped = pattern.sub("", stripped, count=count)
    if stripped != ua_string and is_debug_enabled(logger):
        logger.debug("Stripped masquerading tokens: %r -> %r", ua_string, stripped)
    return stripped


def _browser_name(ua: TokenizedUserAgent) -> str:
    return ua.browser.name or ""


def _is_ios(ua: TokenizedUserAgent) -> bool:
    return ua.os.name == "iOS"


def _name_contains(*needles: str) -> Callable[[TokenizedUserAgent], bool]:
    return lambda ua: any(needle in _browser_name(ua) for needle in needles)


def _name_is(*names: str) -> Callable[[TokenizedUserAgent], bool]:
    return lambda ua: _browser_name(ua) in names


def _as_family(family: str) -> Callable[[TokenizedUserAgent], ResolvedBrowser]:
    """Rename to ``family``, keeping the browser version."""
    return lambda ua: ResolvedBrowser(family, normalize_version(ua.browser.version))


RULES: List[ResolutionRule] = [
    ResolutionRule(
        "unknown",
        lambda ua: not ua.browser.name,
        lambda ua: ResolvedBrowser("", Constants.DEFAULT_VERSION),
    ),
    # Safari (or anything reporting as Safari once stripped) on iOS
    ResolutionRule(
        "ios-safari",
        lambda ua: "Safari" in _browser_name(ua) and _is_ios(ua),
        lambda ua: ResolvedBrowser("iOS", normalize_version(ua.browser.version or ua.os.version)),
    ),
    # Every iOS browser uses the system WebKit, which is at least as new as the OS.
    ResolutionRule(
        "ios-other",
        _is_ios,
        lambda ua: ResolvedBrowser("iOS", normalize_version(ua.os.version)),
    ),
    # caniuse has no history for mobile Chrome variants; proxy to desktop Chrome.
    ResolutionRule("chrome-variant", _name_contains(*_CHROME_VARIANTS), _as_family("Chrome")),
    ResolutionRule("samsung", _name_is("Samsung Browser", "Samsung Internet"), _as_family("Samsung")),
    ResolutionRule("firefox-mobile", _name_is("Firefox Mobile"), _as_family("Firefox")),
    ResolutionRule("ie", _name_is("IE"), _as_family("Explorer")),
    ResolutionRule("ie-mobile", _name_is("IEMobile", "IE Mobile"), _as_family("ExplorerMobile")),
    # Unknown Android Chromium forks: the Blink version is the reliable signal.
    ResolutionRule(
        "android-blink",
        lambda ua: ua.engine.name == "Blink" and ua.os.name == "Android",
        lambda ua: ResolvedBrowser("Chrome", normalize_version(ua.engine.version)),
    ),
    # The stock Android browser ships with the OS.
    ResolutionRule(
        "android-stock",
        _name_is("Android Browser", "Android"),
        lambda ua: ResolvedBrowser("Android", normalize_version(ua.os.version)),
    ),
]


def resolve_user_agent(
    ua_string: str,
    tokenizer: Callable[[str], TokenizedUserAgent] = tokenize,
) -> ResolvedBrowser:
    """Resolve a User-Agent string to a canonical family and normalized version.

    Never raises; an unrecognised browser yields ``ResolvedBrowser("", "0.0.0")``.

    Args:
        ua_string: Raw User-Agent header value.
        tokenizer: Callable producing browser/os/engine identities.

    Returns:
        ResolvedBrowser: The resolved browser.
    """
    parsed = tokenizer(strip_masquerading(ua_string or ""))
    for rule in RULES:
        if rule.applies(parsed):
            resolved = rule.resolve(parsed)
            logger.debug("Resolved UA via %s rule to %s %s", rule.name, resolved.family, resolved.version)
            return resolved
    resolved = ResolvedBrowser(_browser_name(parsed), normalize_version(parsed.browser.version))
    logger.debug("Resolved UA as reported to %s %s", resolved.family, resolved.version)
    return resolved
