"""Contributors report for gitqs: every author in the window, by name."""

from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, render
from gitqs.stats.aggregator import aggregate


def generate_contributors(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    lines = [bold("ALL CONTRIBUTORS (SORTED BY NAME)", color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    result = aggregate(fetch_commits(git, filters), key_fn=lambda c: c.author_name or None)

    if not result.buckets:
        lines.append("No contributors found.")
        return '\n'.join(lines)

    spec = RenderSpec(
        mode=RenderMode.TABLE,
        columns=['#', 'Contributor'],
        sort_order=SortOrder.BY_KEY_ALPHABETICAL,
        metrics=[],
        numbered=True,
    )
    lines.append(render(result, spec, color_enabled))

    return '\n'.join(lines)
