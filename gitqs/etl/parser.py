"""
Record parser for gitqs.

Turns raw git output into typed records. Queries use ASCII record and
unit separators so subjects and names never need escaping. Malformed
records are skipped, never fatal.
"""

import logging
import re
from typing import Iterator, Optional

from gitqs.models.entities import BranchRecord, CommitRecord, FileChange, ShortStat
from gitqs.utils.timestamps import parse_timestamp

logger = logging.getLogger(__name__)

RECORD_SEP = '\x1e'
FIELD_SEP = '\x1f'

# sha, author name, author email, author date, committer date, subject
LOG_FORMAT = '%x1e%H%x1f%aN%x1f%aE%x1f%aI%x1f%cI%x1f%s'
LOG_FIELD_COUNT = 6

# for-each-ref interpolates %xx hex escapes
BRANCH_FORMAT = '%(refname:short)%1f%(authorname)%1f%(committerdate:relative)'

SHORTSTAT_PATTERNS = {
    'files_changed': re.compile(r'(\d+) files? changed'),
    'insertions': re.compile(r'(\d+) insertions?\(\+\)'),
    'deletions': re.compile(r'(\d+) deletions?\(-\)'),
}


def _parse_count(value: str) -> Optional[int]:
    # numstat prints '-' for binary files
    if value == '-':
        return 0
    if value.isdigit():
        return int(value)
    return None


def parse_numstat_line(line: str) -> Optional[FileChange]:
    """
    Parse one `--numstat` line ("<added>\\t<removed>\\t<path>").

    Returns None for blank or malformed lines.
    """
    parts = line.rstrip('\r').split('\t', 2)
    if len(parts) != 3:
        return None

    insertions = _parse_count(parts[0].strip())
    deletions = _parse_count(parts[1].strip())
    if insertions is None or deletions is None:
        return None

    return FileChange(insertions=insertions, deletions=deletions, path=parts[2])


def parse_commit_header(header: str) -> Optional[CommitRecord]:
    """Parse the LOG_FORMAT header line of one commit."""
    fields = header.rstrip('\r').split(FIELD_SEP)
    if len(fields) < LOG_FIELD_COUNT:
        return None

    sha, author_name, author_email, authored, committed = fields[:5]
    authored_at = parse_timestamp(authored)
    committed_at = parse_timestamp(committed)
    if not sha or authored_at is None or committed_at is None:
        return None

    return CommitRecord(
        sha=sha.strip(),
        author_name=author_name.strip(),
        author_email=author_email.strip(),
        authored_at=authored_at,
        committed_at=committed_at,
        subject=FIELD_SEP.join(fields[5:]).strip(),
    )


def parse_log(text: str) -> Iterator[CommitRecord]:
    """
    Stream commits out of `git log --format=LOG_FORMAT [--numstat]` output.

    Yields CommitRecord objects in git's order (newest first by default).
    Chunks whose header cannot be parsed are skipped.
    """
    skipped = 0
    for chunk in text.split(RECORD_SEP):
        if not chunk.strip():
            continue

        lines = chunk.split('\n')
        record = parse_commit_header(lines[0])
        if record is None:
            skipped += 1
            logger.debug("Skipping malformed log record: %r", lines[0][:80])
            continue

        for line in lines[1:]:
            change = parse_numstat_line(line)
            if change is not None:
                record.files.append(change)

        yield record

    if skipped:
        logger.debug("Skipped %d malformed log records", skipped)


def parse_branches(text: str) -> Iterator[BranchRecord]:
    """Parse `git for-each-ref --format=BRANCH_FORMAT` output."""
    for line in text.splitlines():
        fields = line.split(FIELD_SEP)
        if len(fields) != 3 or not fields[0].strip():
            if line.strip():
                logger.debug("Skipping malformed branch line: %r", line[:80])
            continue
        yield BranchRecord(
            name=fields[0].strip(),
            author=fields[1].strip(),
            relative_age=fields[2].strip(),
        )


def parse_shortstat(text: str) -> ShortStat:
    """
    Parse `git diff --shortstat` output.

    e.g. " 3 files changed, 10 insertions(+), 2 deletions(-)"
    Empty output (a clean tree) parses to all zeros.
    """
    values = {}
    for name, pattern in SHORTSTAT_PATTERNS.items():
        match = pattern.search(text)
        values[name] = int(match.group(1)) if match else 0
    return ShortStat(**values)
