"""Filter window shared by every report."""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class FilterContext(BaseModel):
    """
    Immutable since/until/pathspec/limit restriction applied to git queries.

    Accessors return '' (or an empty list) when a filter is unset so an
    absent filter never adds an argument to the command line.
    """
    since: Optional[str] = None
    until: Optional[str] = None
    pathspec: Optional[str] = None
    limit: int = Field(10, ge=1)
    merge_view: Literal["", "enable", "exclusive"] = ""
    branch: Optional[str] = None
    log_options: Tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("since", "until", "pathspec", "branch", mode="before")
    @classmethod
    def blank_is_unset(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("merge_view", mode="before")
    @classmethod
    def normalize_merge_view(cls, value):
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("merge view must be a string")
        return value.strip().lower()

    @property
    def since_arg(self) -> str:
        return f"--since={self.since}" if self.since else ""

    @property
    def until_arg(self) -> str:
        return f"--until={self.until}" if self.until else ""

    @property
    def merges_arg(self) -> str:
        if self.merge_view == "enable":
            return ""
        if self.merge_view == "exclusive":
            return "--merges"
        return "--no-merges"

    def pathspec_args(self) -> List[str]:
        return ["--", self.pathspec] if self.pathspec else []

    def log_args(
        self,
        *extra: str,
        use_window: bool = True,
        use_pathspec: bool = True
    ) -> List[str]:
        """
        Build a `git log` argument list honouring every filter.

        Args:
            extra: Report-specific options (format, --numstat, --author=...)
            use_window: Include --since/--until
            use_pathspec: Append the pathspec after `--`
        """
        args = ["log", "--use-mailmap", self.merges_arg]
        if use_window:
            args.extend([self.since_arg, self.until_arg])
        args.extend(self.log_options)
        args.extend(extra)
        if self.branch:
            args.append(self.branch)
        if use_pathspec:
            args.extend(self.pathspec_args())
        return [arg for arg in args if arg]

    def describe(self) -> str:
        """Human-readable summary of the active window, or '' when unbounded."""
        parts = []
        if self.since:
            parts.append(f"since {self.since}")
        if self.until:
            parts.append(f"until {self.until}")
        if self.branch:
            parts.append(f"on {self.branch}")
        if self.pathspec:
            parts.append(f"path {self.pathspec}")
        return f"({', '.join(parts)})" if parts else ""
