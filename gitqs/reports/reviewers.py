"""
Suggested reviewers report for gitqs.

Ranks authors by commit count over the most recent commits only, so
people active lately rank above people who were active long ago.
"""

from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, render
from gitqs.stats.aggregator import aggregate

REVIEWER_RECENCY_CAP = 100


def generate_suggest_reviewers(
    git: GitRunner,
    filters: FilterContext,
    recency_cap: int = REVIEWER_RECENCY_CAP,
    color_enabled: bool = True
) -> str:
    """
    Generate the suggested code reviewers list.

    Args:
        git: Runner used to query the repository
        filters: Active filter window (limit caps the number of suggestions)
        recency_cap: Only the newest N commits are counted
        color_enabled: Whether to apply colors
    """
    lines = [bold("SUGGESTED CODE REVIEWERS (BASED ON GIT HISTORY)", color_enabled)]
    lines.append(f"(last {recency_cap} commits)")
    lines.append("")

    commits = fetch_commits(git, filters, f"--max-count={recency_cap}")
    result = aggregate(commits, key_fn=lambda c: c.author_name or None)

    if not result.buckets:
        lines.append("No commits found.")
        return '\n'.join(lines)

    spec = RenderSpec(
        mode=RenderMode.TABLE,
        columns=['#', 'Reviewer', 'Commits'],
        sort_order=SortOrder.BY_COUNT_DESCENDING,
        numbered=True,
        limit=filters.limit,
    )
    lines.append(render(result, spec, color_enabled))

    return '\n'.join(lines)
