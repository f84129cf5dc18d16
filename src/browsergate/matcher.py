"""Match a User-Agent against a browserslist query."""
from __future__ import annotations

import logging
import os
from dataclasses import asdict
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .aliases import normalize_query
from .browserslist import BrowserslistQueryEngine, parse_browsers_list
from .common.logging_utils import is_debug_enabled
from .useragent.resolver import resolve_user_agent
from .versioning.compare import compare_versions
from .versioning.models import ComparisonOptions

logger = logging.getLogger(__name__)

QueryEngine = Callable[..., Sequence[str]]


def _coerce_options(
    options: Optional[Union[ComparisonOptions, Mapping[str, Any]]],
    overrides: Mapping[str, Any],
) -> ComparisonOptions:
    """Merge options and keyword overrides; explicitly supplied values win."""
    if isinstance(options, ComparisonOptions):
        if not overrides:
            return options
        merged = asdict(options)
        merged.update(overrides)
        return ComparisonOptions.from_mapping(merged)
    merged = dict(options or {})
    merged.update(overrides)
    return ComparisonOptions.from_mapping(merged)


def matches_ua(
    ua_string: str,
    options: Optional[Union[ComparisonOptions, Mapping[str, Any]]] = None,
    *,
    query_engine: Optional[QueryEngine] = None,
    **kwargs: Any,
) -> bool:
    """Return True if the browser behind ``ua_string`` is selected by the query.

    Errors raised by the query engine propagate unchanged.

    Args:
        ua_string: Raw User-Agent header value.
        options: ComparisonOptions or a mapping with the same fields
            (camelCase names are accepted too).
        query_engine: Callable ``(queries, env=, path=)`` returning
            browserslist tokens. Defaults to the browserslist CLI.
        **kwargs: Option overrides, e.g. ``browsers=["last 2 versions"]``.

    Returns:
        bool: Whether any target matches the resolved browser.
    """
    opts = _coerce_options(options, kwargs)

    queries: Optional[List[str]] = None
    if opts.browsers is not None:
        queries = [normalize_query(query) for query in opts.browsers]
        if is_debug_enabled(logger):
            logger.debug("Normalized queries: %s", queries)

    engine = query_engine or BrowserslistQueryEngine()
    tokens = engine(queries, env=opts.env, path=opts.path or os.getcwd())
    targets = parse_browsers_list(tokens)

    resolved = resolve_user_agent(ua_string)
    family = resolved.family.lower()

    matched = any(
        target.family.lower() == family
        and compare_versions(resolved.version, target.version, opts)
        for target in targets
    )
    logger.debug("UA %s %s matched=%s", resolved.family, resolved.version, matched)
    return matched
