"""Browser name aliasing between browserslist codes and canonical families.

See https://github.com/browserslist/browserslist#browsers for the codes.
"""

import re
from types import MappingProxyType

# Insertion order matters for normalize_query: longer codes that share a
# suffix with a shorter one ("ie_mob"/"ie") must come first.
BROWSER_NAME_MAP = MappingProxyType({
    "bb": "BlackBerry",
    "and_chr": "Chrome",
    "ChromeAndroid": "Chrome",
    "FirefoxAndroid": "Firefox",
    "ff": "Firefox",
    "ie_mob": "ExplorerMobile",
    "ie": "Explorer",
    "and_ff": "Firefox",
    "ios_saf": "iOS",
    "op_mini": "OperaMini",
    "op_mob": "OperaMobile",
    "and_qq": "QQAndroid",
    "and_uc": "UCAndroid",
})

_ALIAS_RE = re.compile("(" + "|".join(re.escape(code) for code in BROWSER_NAME_MAP) + ")")


def canonicalize(name: str) -> str:
    """Return the canonical family for ``name``, or ``name`` itself if unknown."""
    return BROWSER_NAME_MAP.get(name, name)


def normalize_query(query: str) -> str:
    """Rewrite the first browser code found in a query to its canonical name.

    >>> normalize_query("ios_saf >= 12")
    'iOS >= 12'
    """
    match = _ALIAS_RE.search(query)
    if match is None:
        return query
    return query[:match.start()] + BROWSER_NAME_MAP[match.group(0)] + query[match.end():]
