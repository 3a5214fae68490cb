import subprocess
from unittest import mock

from making_mirrors.mirror import (
    MirrorResult,
    clone_repository,
    mirror_all,
    mirror_repository,
    pull_repository,
)
from making_mirrors.registry import Repository

REPO = Repository("github", "torvalds", "linux", "https://github.com/torvalds/linux.git")


def _done(code=0, out=b""):
    return subprocess.CompletedProcess(args=[], returncode=code, stdout=out)


def test_result_string_marks():
    assert str(MirrorResult(REPO, True, "Cloned successfully")) == "✓ torvalds/linux: Cloned successfully"
    assert str(MirrorResult(REPO, False, "Clone failed: boom")).startswith("✗ torvalds/linux: ")


def test_clone_success(tmp_path):
    with mock.patch("subprocess.run", return_value=_done()) as run:
        result = clone_repository(tmp_path, REPO)
    target = tmp_path / "github" / "torvalds" / "linux"
    assert result.success
    assert str(result) == "✓ torvalds/linux: Cloned successfully"
    assert run.call_args.args[0] == ["git", "clone", "--mirror", REPO.url, str(target)]
    assert target.parent.is_dir()


def test_clone_failure(tmp_path):
    with mock.patch("subprocess.run", return_value=_done(code=128)):
        result = clone_repository(tmp_path, REPO)
    assert not result.success
    assert result.message.startswith("Clone failed")
    assert "128" in result.message


def test_clone_without_git(tmp_path):
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("git")):
        result = clone_repository(tmp_path, REPO)
    assert not result.success
    assert result.message.startswith("Clone failed")


def test_clone_directory_failure(tmp_path):
    (tmp_path / "github").write_text("not a directory")
    with mock.patch("subprocess.run", return_value=_done()) as run:
        result = clone_repository(tmp_path, REPO)
    assert not result.success
    assert result.message.startswith("Failed to create directory")
    assert run.call_count == 0


def test_pull_already_up_to_date(tmp_path):
    refs = b"abc refs/heads/main\n"
    with mock.patch("subprocess.run", side_effect=[_done(out=refs), _done(), _done(out=refs)]) as run:
        result = pull_repository(tmp_path, REPO)
    assert result.success
    assert result.message == "Already up to date"
    assert run.call_args_list[1].args[0] == ["git", "-C", str(tmp_path), "remote", "update"]


def test_pull_small_change(tmp_path):
    before = "".join(f"a{i} refs/heads/b{i}\n" for i in range(10)).encode()
    after = "".join(f"c{i} refs/heads/b{i}\n" for i in range(10)).encode()
    with mock.patch("subprocess.run", side_effect=[_done(out=before), _done(), _done(out=after)]):
        result = pull_repository(tmp_path, REPO)
    assert result.success
    assert result.message == "Updated successfully"


def test_pull_significant_change(tmp_path):
    before = b"a refs/heads/main\n"
    after = b"b refs/heads/main\nc refs/heads/dev\nd refs/tags/v1\n"
    with mock.patch("subprocess.run", side_effect=[_done(out=before), _done(), _done(out=after)]):
        result = pull_repository(tmp_path, REPO)
    assert result.success
    assert result.message == "Updated (significant changes detected)"


def test_pull_without_ref_listing(tmp_path):
    with mock.patch("subprocess.run", side_effect=[_done(code=1), _done(), _done(out=b"x refs/heads/main")]):
        result = pull_repository(tmp_path, REPO)
    assert result.success
    assert result.message == "Updated successfully"


def test_pull_remote_update_failure(tmp_path):
    with mock.patch("subprocess.run", side_effect=[_done(out=b"x"), _done(code=1)]) as run:
        result = pull_repository(tmp_path, REPO)
    assert not result.success
    assert result.message.startswith("Remote update failed")
    assert run.call_count == 2


def test_mirror_repository_clones_new(tmp_path):
    with mock.patch("subprocess.run", return_value=_done()) as run:
        result = mirror_repository(tmp_path, REPO)
    assert result.message == "Cloned successfully"
    assert run.call_args.args[0][:3] == ["git", "clone", "--mirror"]


def test_mirror_repository_updates_existing(tmp_path):
    repo_dir = tmp_path / "github" / "torvalds" / "linux"
    (repo_dir / "refs").mkdir(parents=True)
    with mock.patch("subprocess.run", return_value=_done(out=b"x refs/heads/main")) as run:
        result = mirror_repository(tmp_path, REPO)
    assert result.message == "Already up to date"
    assert all(call.args[0][:3] == ["git", "-C", str(repo_dir)] for call in run.call_args_list)


def test_mirror_all_empty(tmp_path):
    with mock.patch("subprocess.run", return_value=_done()) as run:
        results = list(mirror_all(tmp_path, [], 2))
    assert results == []
    assert run.call_count == 0