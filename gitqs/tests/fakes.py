"""Shared test doubles for report and CLI tests."""

from typing import Dict, List, Optional, Sequence, Tuple

from gitqs.etl.parser import FIELD_SEP, RECORD_SEP

# (sha, name, email, author date, committer date, subject, [(added, removed, path)])
CommitSpec = Tuple[str, str, str, str, str, str, List[Tuple[int, int, str]]]


def make_log(commits: Sequence[CommitSpec]) -> str:
    """Build `git log --format=LOG_FORMAT --numstat` style output."""
    chunks = []
    for sha, name, email, authored, committed, subject, files in commits:
        header = FIELD_SEP.join([sha, name, email, authored, committed, subject])
        body = ''.join(f"\n{added}\t{removed}\t{path}" for added, removed, path in files)
        chunks.append(RECORD_SEP + header + body + '\n')
    return ''.join(chunks)


def commit(
    sha: str,
    name: str,
    when: str,
    subject: str = "change",
    files: Optional[List[Tuple[int, int, str]]] = None,
    email: Optional[str] = None,
    committed: Optional[str] = None
) -> CommitSpec:
    """Shorthand for one CommitSpec."""
    email = email or f"{name.split()[0].lower()}@example.com"
    return (sha, name, email, when, committed or when, subject, files or [])


class FakeGit:
    """
    Stand-in for GitRunner.

    Responses are keyed by the git subcommand (first argument); every
    call is recorded so tests can inspect the arguments.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, str]] = None,
        config: Optional[Dict[str, str]] = None
    ):
        self.responses = responses or {}
        self.config = config or {}
        self.calls: List[List[str]] = []
        self.cwd = None

    def run(self, args: Sequence[str]) -> str:
        args = list(args)
        self.calls.append(args)
        return self.responses.get(args[0], '')

    def config_get(self, key: str) -> Optional[str]:
        return self.config.get(key)

    def calls_for(self, subcommand: str) -> List[List[str]]:
        return [call for call in self.calls if call[0] == subcommand]
