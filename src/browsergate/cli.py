"""browsergate command-line entry point.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from .args import parse_args
from .browserslist import QueryEngineError
from .common.logging_utils import add_file_handler, configure_logging
from .config import load_config
from .constants import ExitCodes
from .matcher import matches_ua
from .versioning.models import option_name
from .useragent.resolver import resolve_user_agent

logger = logging.getLogger(__name__)

# CLI dest -> option name; None means "not given on the command line"
_OPTION_FLAGS = {
    "BROWSERS": "browsers",
    "ENV": "env",
    "PATH": "path",
    "IGNORE_MINOR": "ignore_minor",
    "IGNORE_PATCH": "ignore_patch",
    "ALLOW_HIGHER_VERSIONS": "allow_higher_versions",
}


def _setup_logging(args):
    """Configure logging based on CLI arguments."""
    level = getattr(logging, args.LOG_LEVEL) if args.LOG_LEVEL else None
    configure_logging(level)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)
        logger.info("Logging to file: %s", args.LOG_FILE)


def _read_stdin_lines():
    try:
        return [line.strip() for line in sys.stdin if line.strip()]
    except OSError as e:
        logger.error("Unable to read User-Agents from stdin: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _user_agents(values):
    if values == ["-"]:
        return _read_stdin_lines()
    return values


def build_options(args):
    """Merge config file values with command-line flags (flags win)."""
    options = {option_name(key): value for key, value in load_config(args.CONFIG).items()}
    for dest, name in _OPTION_FLAGS.items():
        value = getattr(args, dest, None)
        if value is not None:
            options[name] = value
    return options


def run_resolve(args):
    """Print the resolved browser for each User-Agent."""
    results = [resolve_user_agent(ua) for ua in _user_agents(args.USER_AGENTS)]
    if args.QUIET:
        return ExitCodes.SUCCESS.value
    if args.JSON:
        print(json.dumps([{"family": r.family, "version": r.version} for r in results], indent=2))
    else:
        for r in results:
            print(f"{r.family or '-'} {r.version}")
    return ExitCodes.SUCCESS.value


def run_match(args):
    """Print whether the User-Agent matches and return the exit code."""
    if args.USER_AGENT == "-":
        lines = _read_stdin_lines()
        ua_string = lines[0] if lines else ""
    else:
        ua_string = args.USER_AGENT

    try:
        matched = matches_ua(ua_string, build_options(args))
    except QueryEngineError as e:
        logger.error("Browserslist query failed: %s", e)
        return ExitCodes.QUERY_ERROR.value

    if not args.QUIET:
        print("true" if matched else "false")
    return ExitCodes.SUCCESS.value if matched else ExitCodes.NO_MATCH.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)
    if args.COMMAND == "resolve":
        return run_resolve(args)
    return run_match(args)


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
