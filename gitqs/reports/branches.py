"""
Branch reports for gitqs.

Generates the --branch-tree graph across all refs and the
--branches-by-date listing of local branches.
"""

from gitqs.etl.extractor import GitRunner
from gitqs.etl.parser import BRANCH_FORMAT, parse_branches
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, format_table

TREE_FORMAT = (
    '--+ Commit:  %h %n'
    '  | Date:    %aD (%ar) %n'
    '  | Message: %s %d %n'
    '  + Author:  %aN %n'
)

# Each commit renders as several graph lines
LINES_PER_COMMIT = 5


def generate_branch_tree(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    """Generate the commit graph of all refs, truncated to limit * 5 lines."""
    lines = [bold(f"BRANCH TREE VIEW (LAST {filters.limit})", color_enabled)]
    lines.append("")

    args = [
        'log', '--use-mailmap', '--graph', '--abbrev-commit', '--decorate',
        filters.since_arg, filters.until_arg,
        f'--format=format:{TREE_FORMAT}',
        '--all',
        *filters.log_options,
    ]
    output = git.run([arg for arg in args if arg])

    graph = output.splitlines()[:filters.limit * LINES_PER_COMMIT]
    if not graph:
        lines.append("No commits found.")
    lines.extend(line.rstrip() for line in graph)

    return '\n'.join(lines)


def generate_branches_by_date(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    """Generate local branches, most recently committed first."""
    lines = [bold("ALL BRANCHES (SORTED BY MOST RECENT COMMIT)", color_enabled)]
    lines.append("")

    output = git.run([
        'for-each-ref', '--sort=-committerdate',
        f'--format={BRANCH_FORMAT}', 'refs/heads/',
    ])
    branches = list(parse_branches(output))

    if not branches:
        lines.append("No branches found.")
        return '\n'.join(lines)

    rows = [
        [str(index), branch.relative_age, branch.author, branch.name]
        for index, branch in enumerate(branches, start=1)
    ]
    lines.append(format_table(['#', 'Last commit', 'Author', 'Branch'], rows,
                              ['r', 'l', 'l', 'l'], color_enabled))

    return '\n'.join(lines)
