"""
Interactive menu for gitqs.

Shown when no flag is given. A failing report prints its error and the
menu comes back; empty input or end-of-file quits.
"""

import logging
import sys
from typing import Any, Callable, Dict

from gitqs.errors import GitQsError
from gitqs.etl.extractor import GitRunner
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import Colors, bold, colorize
from gitqs.reports.catalog import AUTHOR_REPORTS, MENU_NUMBERS, run_report

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def format_menu(filters: FilterContext, color_enabled: bool = True) -> str:
    """Build the numbered menu text, grouped by section."""
    lines = [bold("GIT QUICK STATS", color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)

    section = None
    for number, option in MENU_NUMBERS.items():
        if option.section != section:
            section = option.section
            lines.append("")
            lines.append(colorize(f" {section}:", Colors.CYAN, color_enabled))
        lines.append(f"  {number:>3}) {option.title}")

    lines.append("")
    lines.append(" Press Enter to quit")
    return '\n'.join(lines)


def prompt_author(input_fn: InputFn = input) -> str:
    """Ask for an author name until a non-empty one is given."""
    while True:
        author = input_fn("Which author? ").strip()
        if author:
            return author
        print("Please enter an author name.", file=sys.stderr)


def run_interactive(
    git: GitRunner,
    filters: FilterContext,
    config: Dict[str, Any],
    input_fn: InputFn = input
) -> int:
    """
    Run the menu loop until the user quits.

    Returns:
        Process exit code (always 0; report failures are not fatal here)
    """
    color_enabled = config['display']['color_enabled']

    while True:
        print(format_menu(filters, color_enabled))
        try:
            choice = input_fn("Enter a number: ").strip()
        except EOFError:
            print()
            return 0

        if not choice:
            return 0

        option = MENU_NUMBERS.get(choice)
        if option is None:
            print(f"Invalid option: {choice}", file=sys.stderr)
            continue

        try:
            author = None
            if option.key in AUTHOR_REPORTS:
                author = (config.get('author') or '').strip() or prompt_author(input_fn)
            print()
            print(run_report(option.key, git, filters, config, author))
            print()
        except EOFError:
            print()
            return 0
        except GitQsError as e:
            logger.debug("Report %s failed", option.key, exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
        except Exception:
            logger.exception("Report %s failed unexpectedly", option.key)
            print(f"Error: {option.title} failed unexpectedly", file=sys.stderr)
