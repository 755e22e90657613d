"""
Temporal distribution reports for gitqs.

Generates the by-month, by-weekday and by-hour bar charts. Every bucket
of the fixed calendar is always emitted, zero-count ones included, so
the output has 12, 7 or 24 rows regardless of the data.
"""

from datetime import datetime
from typing import Callable, Optional, Sequence

from gitqs.errors import MissingRequiredInput
from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import BAR_WIDTH_DIVISOR, bold, format_number, render
from gitqs.stats.aggregator import aggregate
from gitqs.utils.timestamps import HOURS, MONTHS, WEEKDAYS, hour_key, month_key, weekday_key


def _commits_by(
    git: GitRunner,
    filters: FilterContext,
    title: str,
    label: str,
    key_fn: Callable[[datetime], str],
    key_order: Sequence[str],
    extra: Sequence[str] = (),
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    lines = [bold(title, color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    result = aggregate(
        fetch_commits(git, filters, *extra),
        key_fn=lambda c: key_fn(c.authored_at),
        seed_keys=key_order,
    )

    spec = RenderSpec(
        mode=RenderMode.BAR_CHART,
        columns=[label, 'Commits', 'Activity'],
        sort_order=SortOrder.BY_KEY_CHRONOLOGICAL,
        key_order=list(key_order),
    )
    lines.append(render(result, spec, color_enabled, divisor))
    lines.append("")
    lines.append(f"Total commits: {format_number(result.total.count)}")

    return '\n'.join(lines)


def generate_commits_by_month(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    """Generate commits per calendar month, Jan to Dec."""
    return _commits_by(git, filters, "GIT COMMITS PER MONTH", "Month",
                       month_key, MONTHS, color_enabled=color_enabled, divisor=divisor)


def generate_commits_by_weekday(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    """Generate commits per weekday, Mon to Sun."""
    return _commits_by(git, filters, "GIT COMMITS PER WEEKDAY", "Day",
                       weekday_key, WEEKDAYS, color_enabled=color_enabled, divisor=divisor)


def generate_commits_by_hour(
    git: GitRunner,
    filters: FilterContext,
    author: Optional[str] = None,
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    """
    Generate commits per hour of day, 00 to 23.

    Args:
        git: Runner used to query the repository
        filters: Active filter window
        author: Restrict to commits matching this author (git --author)
        color_enabled: Whether to apply colors
        divisor: Bar width divisor
    """
    title = "GIT COMMITS PER HOUR"
    extra = []
    if author:
        title += f" FOR {author}"
        extra.append(f"--author={author}")
    return _commits_by(git, filters, title, "Hour", hour_key, HOURS,
                       extra=extra, color_enabled=color_enabled, divisor=divisor)


def generate_commits_by_author_by_hour(
    git: GitRunner,
    filters: FilterContext,
    author: Optional[str],
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    """
    Generate commits per hour for one author.

    Raises:
        MissingRequiredInput: If no author is given
    """
    if not author or not author.strip():
        raise MissingRequiredInput("An author name is required for commits by author by hour")
    return generate_commits_by_hour(git, filters, author.strip(), color_enabled, divisor)
