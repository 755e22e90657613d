"""
Report catalog for gitqs.

Single registry shared by the command-line flags and the interactive
menu; menu numbers follow the order of REPORT_OPTIONS.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from gitqs.errors import InvalidArgument, MissingRequiredInput
from gitqs.etl.extractor import GitRunner
from gitqs.models.filters import FilterContext


@dataclass(frozen=True)
class ReportOption:
    """One selectable report."""
    key: str
    short: str
    long: str
    title: str
    section: str


REPORT_OPTIONS = (
    ReportOption('detailed_git_stats', '-T', '--detailed-git-stats',
                 'Contribution stats (by author)', 'Generate'),
    ReportOption('changelogs', '-c', '--changelogs',
                 'Git changelogs (last active days)', 'Generate'),
    ReportOption('changelogs_by_author', '-L', '--changelogs-by-author',
                 'Git changelogs by author', 'Generate'),
    ReportOption('my_daily_stats', '-S', '--my-daily-stats',
                 'My daily stats', 'Generate'),
    ReportOption('branch_tree', '-b', '--branch-tree',
                 'Branch tree view', 'List'),
    ReportOption('branches_by_date', '-D', '--branches-by-date',
                 'All branches (sorted by most recent commit)', 'List'),
    ReportOption('contributors', '-C', '--contributors',
                 'All contributors (sorted by name)', 'List'),
    ReportOption('commits_per_author', '-a', '--commits-per-author',
                 'Git commits per author', 'List'),
    ReportOption('commits_per_day', '-d', '--commits-per-day',
                 'Git commits per date', 'List'),
    ReportOption('commits_by_month', '-m', '--commits-by-month',
                 'Git commits per month', 'List'),
    ReportOption('commits_by_weekday', '-w', '--commits-by-weekday',
                 'Git commits per weekday', 'List'),
    ReportOption('commits_by_hour', '-o', '--commits-by-hour',
                 'Git commits per hour', 'List'),
    ReportOption('commits_by_author_by_hour', '-A', '--commits-by-author-by-hour',
                 'Git commits per hour by author', 'List'),
    ReportOption('suggest_reviewers', '-r', '--suggest-reviewers',
                 'Code reviewers (based on git history)', 'Suggest'),
    ReportOption('json_output', '-j', '--json-output',
                 'Save git log output in JSON format', 'Export'),
)

REPORTS_BY_KEY: Dict[str, ReportOption] = {option.key: option for option in REPORT_OPTIONS}

MENU_NUMBERS: Dict[str, ReportOption] = {
    str(number): option for number, option in enumerate(REPORT_OPTIONS, start=1)
}

AUTHOR_REPORTS = frozenset({'commits_by_author_by_hour', 'changelogs_by_author'})


def run_report(
    key: str,
    git: GitRunner,
    filters: FilterContext,
    config: Dict[str, Any],
    author: Optional[str] = None
) -> str:
    """
    Generate one report and return its text.

    Args:
        key: ReportOption.key
        git: Runner used to query the repository
        filters: Active filter window
        config: Loaded configuration (display options, caps, paths)
        author: Author for the author-scoped reports

    Raises:
        InvalidArgument: Unknown report key
        MissingRequiredInput: Author-scoped report without an author
        ExternalToolError: A git query failed
    """
    if key not in REPORTS_BY_KEY:
        raise InvalidArgument(f"Unknown report: {key}")
    if key in AUTHOR_REPORTS and not (author and author.strip()):
        raise MissingRequiredInput(f"{REPORTS_BY_KEY[key].title} requires an author name")

    color_enabled = config['display']['color_enabled']
    divisor = config['display']['bar_divisor']

    if key == 'detailed_git_stats':
        from gitqs.reports.contributions import generate_detailed_git_stats
        return generate_detailed_git_stats(git, filters, color_enabled)

    elif key == 'changelogs':
        from gitqs.reports.changelogs import generate_changelogs
        return generate_changelogs(git, filters, color_enabled=color_enabled)

    elif key == 'changelogs_by_author':
        from gitqs.reports.changelogs import generate_changelogs_by_author
        return generate_changelogs_by_author(git, filters, author, color_enabled=color_enabled)

    elif key == 'my_daily_stats':
        from gitqs.reports.my_stats import generate_my_daily_stats
        return generate_my_daily_stats(git, filters, color_enabled=color_enabled)

    elif key == 'branch_tree':
        from gitqs.reports.branches import generate_branch_tree
        return generate_branch_tree(git, filters, color_enabled)

    elif key == 'branches_by_date':
        from gitqs.reports.branches import generate_branches_by_date
        return generate_branches_by_date(git, filters, color_enabled)

    elif key == 'contributors':
        from gitqs.reports.contributors import generate_contributors
        return generate_contributors(git, filters, color_enabled)

    elif key == 'commits_per_author':
        from gitqs.reports.authors import generate_commits_per_author
        return generate_commits_per_author(git, filters, color_enabled)

    elif key == 'commits_per_day':
        from gitqs.reports.daily import generate_commits_per_day
        return generate_commits_per_day(git, filters, color_enabled)

    elif key == 'commits_by_month':
        from gitqs.reports.temporal import generate_commits_by_month
        return generate_commits_by_month(git, filters, color_enabled, divisor)

    elif key == 'commits_by_weekday':
        from gitqs.reports.temporal import generate_commits_by_weekday
        return generate_commits_by_weekday(git, filters, color_enabled, divisor)

    elif key == 'commits_by_hour':
        from gitqs.reports.temporal import generate_commits_by_hour
        return generate_commits_by_hour(git, filters, color_enabled=color_enabled, divisor=divisor)

    elif key == 'commits_by_author_by_hour':
        from gitqs.reports.temporal import generate_commits_by_author_by_hour
        return generate_commits_by_author_by_hour(git, filters, author, color_enabled, divisor)

    elif key == 'suggest_reviewers':
        from gitqs.reports.reviewers import generate_suggest_reviewers
        return generate_suggest_reviewers(git, filters, config['reviewer_recency_cap'], color_enabled)

    # json_output
    from gitqs.reports.export import generate_json_output
    return generate_json_output(git, filters, config['json_output'], color_enabled)
