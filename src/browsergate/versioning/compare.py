"""Version comparison under configurable strictness."""

from typing import Union

import semantic_version

from ..constants import Strictness
from .models import ComparisonOptions
from .parser import normalize_version


def strictness_for(options: ComparisonOptions) -> Strictness:
    """Map option flags to a strictness level; ignore_minor wins over ignore_patch."""
    if options.ignore_minor:
        return Strictness.IGNORE_MINOR
    if options.ignore_patch:
        return Strictness.IGNORE_PATCH
    return Strictness.EXACT


def reference_spec(reference: Union[str, int, float], strictness: Strictness) -> semantic_version.SimpleSpec:
    """Build the range a candidate must fall in to match ``reference``.

    EXACT pins the full version, IGNORE_PATCH accepts any patch of the same
    major.minor, IGNORE_MINOR accepts anything with the same major.
    """
    version = semantic_version.Version(normalize_version(reference))
    if strictness is Strictness.IGNORE_MINOR:
        return semantic_version.SimpleSpec(
            f">={version.major}.0.0,<{version.major + 1}.0.0"
        )
    if strictness is Strictness.IGNORE_PATCH:
        return semantic_version.SimpleSpec(
            f">={version.major}.{version.minor}.0,<{version.major}.{version.minor + 1}.0"
        )
    return semantic_version.SimpleSpec(f"=={version}")


def compare_versions(
    candidate: Union[str, int, float],
    reference: Union[str, int, float],
    options: ComparisonOptions,
) -> bool:
    """Return True if ``candidate`` satisfies ``reference`` under ``options``.

    Args:
        candidate: Version resolved from the User-Agent.
        reference: Version taken from the target browser list.
        options: Comparison options.

    Returns:
        bool: Whether the candidate qualifies.
    """
    candidate_version = semantic_version.Version(normalize_version(candidate))
    if options.allow_higher_versions:
        return candidate_version >= semantic_version.Version(normalize_version(reference))
    return reference_spec(reference, strictness_for(options)).match(candidate_version)
