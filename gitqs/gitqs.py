#!/usr/bin/env python3
"""
gitqs - quick statistics about a git repository's history.

A CLI tool that reports contribution shares, commit activity by time,
branches, changelogs and reviewer suggestions.

Usage:
    gitqs [option]
    python -m gitqs.gitqs [option]

With no option an interactive menu is shown.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from gitqs.config.loader import build_filter_context, load_config
from gitqs.errors import GitQsError, InvalidArgument, MissingRequiredInput
from gitqs.etl.extractor import GitRunner, check_dependencies, check_git_repo
from gitqs.reports.catalog import AUTHOR_REPORTS, REPORT_OPTIONS, run_report

ENVIRONMENT_HELP = """\
environment:
  _GIT_SINCE          only commits more recent than this date ("2 weeks ago")
  _GIT_UNTIL          only commits older than this date
  _GIT_PATHSPEC       limit to paths, e.g. ":!docs" to exclude a directory
  _GIT_LIMIT          number of results for limited reports (default: 10)
  _GIT_LOG_OPTIONS    extra git log options, e.g. "--first-parent"
  _GIT_MERGE_VIEW     "enable" to include merges, "exclusive" for merges only
  _GIT_BRANCH         branch or revision to report on
  _GIT_AUTHOR         author for -A/-L when no prompt is possible
  _GIT_JSON_OUTPUT    destination for -j (default: git-log.json)
  _GIT_BAR_DIVISOR    bar chart width divisor (default: 1.25)
  _GIT_REVIEWER_CAP   recent commits considered by -r (default: 100)
  _MENU_THEME         "none" disables colors (as does NO_COLOR)
  _GIT_DEBUG          "1" logs every git command to stderr
"""


class QuickStatsParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as InvalidArgument."""

    def error(self, message):
        raise InvalidArgument(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = QuickStatsParser(
        prog='gitqs',
        description='Quick statistics about a git repository. '
                    'Run without options for an interactive menu.',
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    # Report views (mutually exclusive group)
    views = parser.add_mutually_exclusive_group()
    for option in REPORT_OPTIONS:
        views.add_argument(option.short, option.long, dest='report',
                           action='store_const', const=option.key,
                           help=option.title)

    parser.add_argument('-h', '-?', '--help', action='store_true',
                        help='Show this help message and exit')

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def resolve_author(config: Dict[str, Any]) -> str:
    """
    Author for an author-scoped report run from a flag.

    Uses _GIT_AUTHOR when set, otherwise prompts once if stdin is a
    terminal.

    Raises:
        MissingRequiredInput: No author configured and none entered
    """
    author = (config.get('author') or '').strip()
    if author:
        return author

    if not sys.stdin.isatty():
        raise MissingRequiredInput("An author name is required; set _GIT_AUTHOR")

    try:
        author = input("Which author? ").strip()
    except EOFError:
        author = ''
    if not author:
        raise MissingRequiredInput("No author name given")
    return author


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = create_parser()

    if len(argv) > 1:
        print("Error: only one option may be given at a time", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    try:
        args = parser.parse_args(argv)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    if args.help:
        parser.print_help()
        return 0

    try:
        config = load_config()
        _configure_logging(config['verbose'])
        filters = build_filter_context(config)

        check_dependencies()
        git = GitRunner()
        check_git_repo(git)

        if args.report is None:
            from gitqs.interactive import run_interactive
            return run_interactive(git, filters, config)

        author = resolve_author(config) if args.report in AUTHOR_REPORTS else None
        print(run_report(args.report, git, filters, config, author))
        return 0

    except GitQsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
