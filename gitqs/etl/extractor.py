"""
Command invoker for gitqs.

Runs git as a subprocess and captures its standard output as text.
Every query is read-only; pagers, colours, prompts and signature
verification are disabled so output is deterministic.
"""

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Union

from gitqs.errors import ExternalToolError, MissingDependency, NotARepository

logger = logging.getLogger(__name__)

REQUIRED_UTILITIES = ('git',)

GIT_GLOBAL_OPTIONS = [
    '--no-pager',
    '-c', 'log.showSignature=false',
    '-c', 'color.ui=never',
]

GIT_ENVIRONMENT = {
    'GIT_PAGER': 'cat',
    'PAGER': 'cat',
    'GIT_TERMINAL_PROMPT': '0',
}


def run_command(
    base_command: str,
    args: Sequence[str],
    cwd: Optional[Union[str, Path]] = None,
    env: Optional[Dict[str, str]] = None
) -> str:
    """
    Run an external command and return its stdout.

    Args:
        base_command: Executable name, e.g. 'git'
        args: Arguments passed verbatim (no shell)
        cwd: Working directory, defaults to the current one
        env: Full environment for the child process

    Raises:
        ExternalToolError: If the command is missing or exits non-zero
    """
    command = [base_command] + list(args)
    logger.debug("Running: %s", shlex.join(command))

    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            env=env,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
        )
    except FileNotFoundError:
        raise ExternalToolError(command, stderr=f"{base_command}: command not found")
    except OSError as e:
        raise ExternalToolError(command, stderr=str(e))

    if result.returncode != 0:
        raise ExternalToolError(command, result.returncode, (result.stderr or '').strip())

    return result.stdout


class GitRunner:
    """Runs non-interactive git queries inside one working directory."""

    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        self.cwd = cwd

    def _environment(self) -> Dict[str, str]:
        env = dict(os.environ)
        env.update(GIT_ENVIRONMENT)
        return env

    def run(self, args: Sequence[str]) -> str:
        """Run `git <args>` and return stdout."""
        return run_command('git', GIT_GLOBAL_OPTIONS + list(args), self.cwd, self._environment())

    def config_get(self, key: str) -> Optional[str]:
        """Return a git config value, or None when it is unset."""
        try:
            value = self.run(['config', '--get', key]).strip()
        except ExternalToolError as e:
            # git config exits 1 for a missing key
            if e.returncode == 1:
                return None
            raise
        return value or None


def check_dependencies(utilities: Iterable[str] = REQUIRED_UTILITIES) -> None:
    """
    Fail fast if a required utility is missing.

    Raises:
        MissingDependency: For the first utility not found on PATH
    """
    for utility in utilities:
        if shutil.which(utility) is None:
            raise MissingDependency(utility)


def check_git_repo(git: GitRunner) -> None:
    """
    Check the runner's directory is inside a git work tree.

    Raises:
        NotARepository: If git does not recognise a work tree here
    """
    try:
        inside = git.run(['rev-parse', '--is-inside-work-tree']).strip()
    except ExternalToolError:
        inside = ''
    if inside != 'true':
        raise NotARepository(str(git.cwd or Path.cwd()))

