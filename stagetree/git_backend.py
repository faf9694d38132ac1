"""Git-backed diff provider and stage sink.

Lists changed paths from ``git status --porcelain`` and per-file line counts
from ``git diff --numstat``. Staging runs ``git add`` one path at a time.
Every failure raises ``GitCommandError``; nothing is retried or swallowed.
Paths are passed as literal pathspecs; non-UTF-8 file names are skipped.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .changes import ChangedPath, ChangeStatus, LineStats

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT_SECONDS = 5.0

_STATUS_LETTERS = {status.value: status for status in ChangeStatus}
_CONFLICT_CODES = {"AA", "DD"}


class GitCommandError(RuntimeError):
    """A git invocation failed, timed out, or git is unavailable."""

    def __init__(self, args: list[str], returncode: int | None, stderr: str) -> None:
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or (f"exit status {returncode}" if returncode is not None else "no output")
        super().__init__(f"git {' '.join(args)}: {detail}")


def _run_git(
    repo_root: Path,
    args: list[str],
    timeout_seconds: float,
    ok_returncodes: tuple[int, ...] = (0,),
) -> subprocess.CompletedProcess[str]:
    logger.debug("git --literal-pathspecs -C %s %s", repo_root, " ".join(args))
    try:
        proc = subprocess.run(
            # Changed paths are literal file names, never glob patterns.
            ["git", "--literal-pathspecs", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitCommandError(args, None, str(exc)) from exc
    if proc.returncode not in ok_returncodes:
        raise GitCommandError(args, proc.returncode, proc.stderr.strip())
    return proc


def resolve_repo_root(path: Path, timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS) -> Path:
    """Return the work-tree top level containing ``path``."""
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    top_level = proc.stdout.strip()
    if not top_level:
        raise GitCommandError(["rev-parse", "--show-toplevel"], proc.returncode, "empty work-tree path")
    return Path(top_level).resolve()


def _iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        path_text = token[3:]
        records.append((status, path_text))

        # For renamed/copied entries, porcelain -z appends an extra token
        # containing the source path; the first path token is the destination.
        if "R" in status or "C" in status:
            index += 1

    return records


def is_utf8_path(path: str) -> bool:
    """Return ``False`` for names holding undecodable bytes (lone surrogates)."""
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def change_status_from_porcelain(code: str) -> ChangeStatus:
    """Map a two-letter porcelain ``XY`` code onto one ``ChangeStatus``."""
    if code == "??":
        return ChangeStatus.UNTRACKED
    if "U" in code or code in _CONFLICT_CODES:
        return ChangeStatus.CONFLICTED
    index_code, worktree_code = code[0], code[1]
    if worktree_code == "D":
        return ChangeStatus.DELETED
    for letter in (index_code, worktree_code):
        status = _STATUS_LETTERS.get(letter)
        if status is not None:
            return status
    return ChangeStatus.MODIFIED


def parse_numstat(output: str) -> LineStats:
    """Sum ``added<TAB>removed<TAB>path`` rows; binary rows (``-``) count 0."""
    added = 0
    removed = 0
    for line in output.splitlines():
        parts = line.split("\t", 2)
        if len(parts) < 3:
            continue
        if parts[0].isdigit():
            added += int(parts[0])
        if parts[1].isdigit():
            removed += int(parts[1])
    return LineStats(added=added, removed=removed)


class GitDiffProvider:
    """``DiffProvider`` comparing HEAD against index plus working tree."""

    def __init__(
        self,
        repo_path: Path,
        timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS,
        include_untracked: bool = True,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.include_untracked = include_untracked
        self.repo_root = resolve_repo_root(Path(repo_path), timeout_seconds)
        self._untracked: set[str] = set()
        self._has_head: bool | None = None

    def _git(self, args: list[str], ok_returncodes: tuple[int, ...] = (0,)) -> subprocess.CompletedProcess[str]:
        return _run_git(self.repo_root, args, self.timeout_seconds, ok_returncodes)

    def has_head(self) -> bool:
        """Return whether the current branch has a commit (not unborn)."""
        if self._has_head is None:
            proc = self._git(["rev-parse", "--verify", "--quiet", "HEAD"], ok_returncodes=(0, 1))
            self._has_head = proc.returncode == 0
        return self._has_head

    def list_changed_paths(self) -> list[ChangedPath]:
        untracked_mode = "all" if self.include_untracked else "no"
        proc = self._git(["status", "--porcelain=v1", "-z", f"--untracked-files={untracked_mode}"])
        self._has_head = None
        self._untracked = set()

        changes: list[ChangedPath] = []
        for code, rel_path in _iter_porcelain_records(proc.stdout):
            if not rel_path or code == "!!":
                continue
            if not is_utf8_path(rel_path):
                logger.warning("skipping change with non-UTF-8 file name: %r", rel_path)
                continue
            status = change_status_from_porcelain(code)
            if status is ChangeStatus.UNTRACKED:
                self._untracked.add(rel_path)
            changes.append(ChangedPath(path=rel_path, status=status))
        logger.debug("%d changed path(s) in %s", len(changes), self.repo_root)
        return changes

    def line_stats(self, path: str) -> LineStats:
        if path in self._untracked:
            # --no-index exits 1 when the inputs differ.
            proc = self._git(["diff", "--no-index", "--numstat", "--", "/dev/null", path], ok_returncodes=(0, 1))
            return parse_numstat(proc.stdout)

        if self.has_head():
            proc = self._git(["diff", "--numstat", "HEAD", "--", path])
            return parse_numstat(proc.stdout)

        # Unborn HEAD: staged content plus unstaged edits on top of it.
        staged = parse_numstat(self._git(["diff", "--cached", "--numstat", "--", path]).stdout)
        unstaged = parse_numstat(self._git(["diff", "--numstat", "--", path]).stdout)
        return LineStats(added=staged.added + unstaged.added, removed=staged.removed + unstaged.removed)


class GitStageSink:
    """``StageSink`` running ``git add -A`` so deletions stage too."""

    def __init__(self, repo_path: Path, timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds
        self.repo_root = resolve_repo_root(Path(repo_path), timeout_seconds)

    def stage(self, path: str) -> None:
        _run_git(self.repo_root, ["add", "-A", "--", path], self.timeout_seconds)
