"""Version normalization, range expansion and comparison."""

from .compare import compare_versions, reference_spec, strictness_for
from .models import BrowserTarget, ComparisonOptions, ResolvedBrowser
from .parser import expand_range, is_range_token, normalize_version

__all__ = [
    "BrowserTarget",
    "ComparisonOptions",
    "ResolvedBrowser",
    "compare_versions",
    "expand_range",
    "is_range_token",
    "normalize_version",
    "reference_spec",
    "strictness_for",
]
