"""Cloning and updating bare mirrors of repositories with git."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

from .registry import Repository


@dataclass(frozen=True)
class MirrorResult:
    """The outcome of mirroring one repository."""

    repo: Repository
    success: bool
    message: str

    def __str__(self) -> str:
        mark = "✓" if self.success else "✗"
        return f"{mark} {self.repo.owner}/{self.repo.name}: {self.message}"


def _repo_dir(mirrors_dir: str | os.PathLike, repo: Repository) -> Path:
    return Path(mirrors_dir, repo.provider, repo.owner, repo.name)


def _run(args: list[str]) -> str | None:
    """Run a command with its output discarded; return an error or ``None``."""
    try:
        completed = subprocess.run(
            args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
        )
    except OSError as exc:
        return str(exc)
    if completed.returncode != 0:
        return f"exit status {completed.returncode}"
    return None


def _show_ref(repo_dir: Path) -> str | None:
    try:
        completed = subprocess.run(
            ["git", "-C", str(repo_dir), "show-ref"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return None
    if completed.returncode != 0:
        return None
    return completed.stdout.decode("utf-8", errors="replace").strip()


def clone_repository(mirrors_dir: str | os.PathLike, repo: Repository) -> MirrorResult:
    """Create a new bare mirror of ``repo`` under ``mirrors_dir``."""
    repo_dir = _repo_dir(mirrors_dir, repo)
    try:
        repo_dir.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return MirrorResult(repo, False, f"Failed to create directory: {exc}")

    error = _run(["git", "clone", "--mirror", repo.url, str(repo_dir)])
    if error is not None:
        return MirrorResult(repo, False, f"Clone failed: {error}")
    return MirrorResult(repo, True, "Cloned successfully")


def pull_repository(repo_dir: str | os.PathLike, repo: Repository) -> MirrorResult:
    """Update an existing mirror and report whether its refs changed."""
    repo_dir = Path(repo_dir)
    before = _show_ref(repo_dir)

    error = _run(["git", "-C", str(repo_dir), "remote", "update"])
    if error is not None:
        return MirrorResult(repo, False, f"Remote update failed: {error}")

    after = _show_ref(repo_dir)
    if before is None or after is None:
        return MirrorResult(repo, True, "Updated successfully")
    if before == after:
        return MirrorResult(repo, True, "Already up to date")

    before_count = len(before.split("\n"))
    after_count = len(after.split("\n"))
    if abs(before_count - after_count) > before_count // 10:
        return MirrorResult(repo, True, "Updated (significant changes detected)")
    return MirrorResult(repo, True, "Updated successfully")


def mirror_repository(mirrors_dir: str | os.PathLike, repo: Repository) -> MirrorResult:
    """Update the mirror of ``repo`` if it exists, otherwise clone it."""
    repo_dir = _repo_dir(mirrors_dir, repo)
    if (repo_dir / "refs").exists():
        return pull_repository(repo_dir, repo)
    return clone_repository(mirrors_dir, repo)


def mirror_all(
    mirrors_dir: str | os.PathLike,
    repos: Iterable[Repository],
    workers: int | None = None,
) -> Iterator[MirrorResult]:
    """Mirror repositories concurrently, yielding results as they finish."""
    max_workers = workers if workers is not None else (os.cpu_count() or 1)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(mirror_repository, mirrors_dir, repo) for repo in repos]
        for future in as_completed(futures):
            yield future.result()