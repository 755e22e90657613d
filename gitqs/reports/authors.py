"""
Commits per author report for gitqs.

Generates the --commits-per-author view with each author's share.
"""

from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, format_number, render
from gitqs.stats.aggregator import aggregate


def generate_commits_per_author(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    """
    Generate commit counts per author, most active first.

    An empty window still renders the header and a zero TOTAL row.
    """
    lines = [bold("GIT COMMITS PER AUTHOR", color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    result = aggregate(fetch_commits(git, filters), key_fn=lambda c: c.author_name or None)

    lines.append(f"Total commits: {format_number(result.total.count)}")
    lines.append(f"Total authors: {format_number(len(result))}")
    lines.append("")

    spec = RenderSpec(
        mode=RenderMode.TABLE,
        columns=['Author', 'Commits', '%'],
        sort_order=SortOrder.BY_COUNT_DESCENDING,
        show_percent=True,
        show_total=True,
    )
    lines.append(render(result, spec, color_enabled))

    return '\n'.join(lines)
