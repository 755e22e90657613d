"""
Commits per day report for gitqs.

Generates the --commits-per-day view keyed by author date.
"""

from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, render
from gitqs.stats.aggregator import aggregate
from gitqs.utils.timestamps import date_key


def generate_commits_per_day(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    """
    Generate commit counts per calendar day, busiest day first.

    Args:
        git: Runner used to query the repository
        filters: Active filter window
        color_enabled: Whether to apply colors
    """
    lines = [bold("GIT COMMITS PER DATE", color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    result = aggregate(
        fetch_commits(git, filters),
        key_fn=lambda c: date_key(c.authored_at),
    )

    spec = RenderSpec(
        mode=RenderMode.TABLE,
        columns=['Date', 'Commits', '%'],
        sort_order=SortOrder.BY_COUNT_DESCENDING,
        show_percent=True,
        show_total=True,
    )
    lines.append(render(result, spec, color_enabled))

    return '\n'.join(lines)
