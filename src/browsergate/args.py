"""Argument parsing functionality for browsergate."""

import argparse

from . import __version__


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="browsergate",
        description="browsergate - match browser User-Agents against browserslist queries",
        add_help=True,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    sub = parser.add_subparsers(dest="COMMAND", required=True)

    resolve = sub.add_parser("resolve", help="Resolve User-Agent strings to browser family and version")
    resolve.add_argument("USER_AGENTS",
                         nargs="+",
                         help="User-Agent strings, or - to read one per line from stdin")
    resolve.add_argument("--json",
                         dest="JSON",
                         help="Print results as JSON",
                         action="store_true")

    match = sub.add_parser("match", help="Check whether a User-Agent is selected by a browserslist query")
    match.add_argument("USER_AGENT",
                       help="User-Agent string, or - to read the first line of stdin")
    match.add_argument("-b", "--browsers",
                       dest="BROWSERS",
                       help="Browserslist query (repeatable). Defaults to the project config.",
                       action="append",
                       type=str)
    match.add_argument("--env",
                       dest="ENV",
                       help="Browserslist environment from the project config",
                       action="store",
                       type=str)
    match.add_argument("--path",
                       dest="PATH",
                       help="Project directory used to discover browserslist config",
                       action="store",
                       type=str)
    match.add_argument("--ignore-minor",
                       dest="IGNORE_MINOR",
                       help="Match any minor version of a target's major",
                       action="store_true",
                       default=None)
    match.add_argument("--no-ignore-patch",
                       dest="IGNORE_PATCH",
                       help="Require the exact patch version",
                       action="store_false",
                       default=None)
    match.add_argument("--allow-higher-versions",
                       dest="ALLOW_HIGHER_VERSIONS",
                       help="Also match versions newer than the targets",
                       action="store_true",
                       default=None)
    match.add_argument("-c", "--config",
                       dest="CONFIG",
                       help="Path to configuration file (YAML, YML, or JSON)",
                       action="store",
                       type=str)
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
