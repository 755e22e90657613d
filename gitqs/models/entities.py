"""
Data structures (entities) for gitqs.

Uses dataclasses for clean, typed data structures.
Records are produced by the parser from git output and discarded
once a report has been rendered.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


@dataclass
class FileChange:
    """One numstat line: lines added/removed in a single path."""
    insertions: int
    deletions: int
    path: str


@dataclass
class CommitRecord:
    """A single commit as emitted by the structured log format."""
    sha: str
    author_name: str
    author_email: str
    authored_at: datetime
    committed_at: datetime
    subject: str = ""
    files: List[FileChange] = field(default_factory=list)

    @property
    def insertions(self) -> int:
        """Lines added across all files."""
        return sum(change.insertions for change in self.files)

    @property
    def deletions(self) -> int:
        """Lines removed across all files."""
        return sum(change.deletions for change in self.files)

    @property
    def lines_changed(self) -> int:
        return self.insertions + self.deletions


@dataclass
class BranchRecord:
    """A local branch with its most recent commit's author and age."""
    name: str
    author: str
    relative_age: str


@dataclass
class ShortStat:
    """Summary line of `git diff --shortstat`."""
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0


class RenderMode(Enum):
    """How an aggregate is laid out."""
    TABLE = "table"
    BAR_CHART = "bar_chart"


class SortOrder(Enum):
    """Row ordering for rendered buckets."""
    BY_KEY_CHRONOLOGICAL = "by_key_chronological"
    BY_COUNT_DESCENDING = "by_count_descending"
    BY_KEY_ALPHABETICAL = "by_key_alphabetical"


@dataclass
class RenderSpec:
    """
    Rendering instructions for one report.

    `columns` holds the full header row. For tables it must match the
    cells produced by the other flags: an optional '#' column, the key,
    one column per metric (plus a '%' column each when show_percent),
    and first/last columns when show_span.
    """
    mode: RenderMode
    columns: List[str]
    sort_order: SortOrder
    metrics: List[str] = field(default_factory=lambda: ["count"])
    key_order: Optional[List[str]] = None
    show_percent: bool = False
    show_span: bool = False
    show_total: bool = False
    numbered: bool = False
    limit: Optional[int] = None
