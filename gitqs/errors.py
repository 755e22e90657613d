"""
Error kinds for gitqs.

Every error a user can see derives from GitQsError. The dispatcher prints
the message to stderr and decides whether the failure ends the run.
"""

from typing import List, Optional


class GitQsError(Exception):
    """Base class for all user-facing gitqs errors."""


class MissingDependency(GitQsError):
    """A required external utility is not available on PATH."""

    def __init__(self, utility: str):
        self.utility = utility
        super().__init__(f"'{utility}' is required but was not found on PATH")


class NotARepository(GitQsError):
    """The current directory is not inside a git work tree."""

    def __init__(self, path: str = "."):
        self.path = path
        super().__init__(f"Not a git repository (or any parent up to the mount point): {path}")


class ExternalToolError(GitQsError):
    """A git query exited non-zero or could not be started."""

    def __init__(
        self,
        command: List[str],
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr

        message = f"'{' '.join(self.command)}' failed"
        if returncode is not None:
            message += f" with exit code {returncode}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class InvalidArgument(GitQsError):
    """Unrecognized flag, wrong argument count, or invalid configuration value."""


class MissingRequiredInput(GitQsError):
    """A report needs input (e.g. an author name) that was not supplied."""


class OutputWriteError(GitQsError):
    """A report's output file could not be written."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
