"""Browserslist query engine adapter and browser list parsing.

Queries are resolved by the browserslist CLI, which prints one
``"<name> <version>"`` token per line. Those tokens are turned into
canonical ``BrowserTarget`` entries here.
"""
from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Iterable, List, Optional, Sequence

from .aliases import canonicalize
from .constants import Constants
from .versioning.models import BrowserTarget
from .versioning.parser import expand_range, is_range_token

logger = logging.getLogger(__name__)


class QueryEngineError(Exception):
    """Raised when the browserslist command cannot resolve a query."""


class BrowserslistQueryEngine:
    """Resolve browserslist queries by running the browserslist CLI.

    When no queries are given the CLI falls back to the project config
    (``.browserslistrc``, ``package.json``) discovered from ``path``.
    """

    def __init__(self, command: Optional[str] = None, timeout: int = Constants.QUERY_TIMEOUT_SEC):
        """Initialize the engine.

        Args:
            command: Command line used to invoke browserslist. Defaults to the
                BROWSERGATE_BROWSERSLIST_CMD environment variable, then
                ``npx --yes browserslist``.
            timeout: Seconds to wait for the command.
        """
        self.command = command or os.environ.get(Constants.ENV_BROWSERSLIST_CMD) or Constants.BROWSERSLIST_CMD
        self.timeout = timeout

    def build_args(self, queries: Optional[Sequence[str]], env: Optional[str] = None) -> List[str]:
        """Build the argv for a browserslist invocation."""
        args = shlex.split(self.command)
        if env:
            args.append(f"--env={env}")
        if queries:
            args.append(", ".join(queries))
        return args

    def __call__(
        self,
        queries: Optional[Sequence[str]],
        env: Optional[str] = None,
        path: Optional[str] = None,
    ) -> List[str]:
        """Return the browser tokens selected by ``queries``.

        Raises:
            QueryEngineError: If the command or ``path`` is missing, or the
                command fails or times out.
        """
        # an empty query list selects no browsers
        if queries is not None and not queries:
            return []
        if path and not os.path.isdir(path):
            raise QueryEngineError(f"path not found: {path}")

        args = self.build_args(queries, env)
        logger.debug("Running %s in %s", args, path or os.getcwd())
        try:
            result = subprocess.run(
                args,
                cwd=path or None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise QueryEngineError(f"browserslist command not found: {exc.filename or args[0]}") from exc
        except OSError as exc:
            raise QueryEngineError(f"unable to run browserslist: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise QueryEngineError(f"browserslist timed out after {self.timeout} seconds") from exc

        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise QueryEngineError(message or f"browserslist exited with status {result.returncode}")

        return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def parse_browsers_list(tokens: Iterable[str]) -> List[BrowserTarget]:
    """Turn browserslist tokens into canonical targets.

    Technology-preview tokens ("safari TP") are dropped, names are
    canonicalized and version ranges ("ios_saf 13.0-13.3") are expanded to
    one target per minor version. Versions are otherwise left as reported.

    Args:
        tokens: ``"<name> <version>"`` strings.

    Returns:
        list: BrowserTarget entries in input order.
    """
    targets: List[BrowserTarget] = []
    for token in tokens:
        name, _, version = token.partition(" ")
        if version == Constants.PREVIEW_VERSION:
            logger.debug("Skipping non-numeric browser version: %s", token)
            continue

        family = canonicalize(name)
        if is_range_token(version):
            targets.extend(BrowserTarget(family, v) for v in expand_range(version))
        else:
            targets.append(BrowserTarget(family, version))

    logger.debug("Parsed %d browser targets", len(targets))
    return targets
