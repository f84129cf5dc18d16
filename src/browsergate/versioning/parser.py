"""Version normalization and range expansion utilities.

Versions coming from User-Agent strings and from browserslist are often
partial ("10", "10.2") or carry a fourth build component ("91.0.4472.124").
Everything is reduced to a plain MAJOR.MINOR.PATCH string before it reaches
the comparator.
"""

import logging
import re
from typing import List, Optional, Union

import semantic_version

from ..constants import Constants

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def _parse_component(value: str) -> int:
    """Parse the leading digits of a version component, 0 when there are none."""
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0


def normalize_version(version: Optional[Union[str, int, float]] = None) -> str:
    """Convert a version to a 3-component numeric string.

    Never raises: malformed input degrades to zeros.

    >>> normalize_version("10.2")
    '10.2.0'
    >>> normalize_version("91.0.4472.124")
    '91.0.4472'
    >>> normalize_version("garbage")
    '0.0.0'
    """
    if version is None or version == "":
        return Constants.DEFAULT_VERSION

    text = str(version).strip()
    if semantic_version.validate(text):
        parsed = semantic_version.Version(text)
        # pre-release and build tags are not comparable across browsers
        return f"{parsed.major}.{parsed.minor}.{parsed.patch}"

    parts = text.split(".")[:3]
    parts.extend([""] * (3 - len(parts)))
    return ".".join(str(_parse_component(part)) for part in parts)


def is_range_token(version: str) -> bool:
    """Return True for range tokens like "10.0-10.2".

    A leading hyphen does not count, so negative-looking tokens stay single.
    """
    return version.find("-") > 0


def expand_range(range_token: str) -> List[str]:
    """Expand "<start>-<end>" into the minor versions it spans.

    The start is always emitted, so an inverted range yields only its start.

    >>> expand_range("10.0-10.2")
    ['10.0.0', '10.1.0', '10.2.0']
    """
    start, _, end = range_token.partition("-")
    current = semantic_version.Version(normalize_version(start))
    last = semantic_version.Version(normalize_version(end))

    versions = [str(current)]
    current = current.next_minor()
    while current <= last:
        versions.append(str(current))
        current = current.next_minor()

    logger.debug("Expanded range %s into %d versions", range_token, len(versions))
    return versions
