"""Models package - parsed records, render specs and the filter context."""

from .entities import (
    FileChange,
    CommitRecord,
    BranchRecord,
    ShortStat,
    RenderMode,
    SortOrder,
    RenderSpec,
)
from .filters import FilterContext

__all__ = [
    "FileChange",
    "CommitRecord",
    "BranchRecord",
    "ShortStat",
    "RenderMode",
    "SortOrder",
    "RenderSpec",
    "FilterContext",
]
