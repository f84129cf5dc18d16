"""browsergate - match browser User-Agents against browserslist queries."""

from .aliases import normalize_query
from .browserslist import BrowserslistQueryEngine, QueryEngineError, parse_browsers_list
from .matcher import matches_ua
from .useragent.resolver import resolve_user_agent
from .versioning.models import BrowserTarget, ComparisonOptions, ResolvedBrowser

__version__ = "0.1.0"

__all__ = [
    "BrowserTarget",
    "BrowserslistQueryEngine",
    "ComparisonOptions",
    "QueryEngineError",
    "ResolvedBrowser",
    "matches_ua",
    "normalize_query",
    "parse_browsers_list",
    "resolve_user_agent",
]
