"""Tests for writing rendered artifacts to disk."""

import os

import pytest

from dockforge_common import ArtifactWriteError
from dockforge_sdk import find_conflicts, render, write_artifacts
from dockforge_sdk import writer
from dockforge_sdk.writer import BACKUP_SUFFIX, STAGING_SUFFIX


@pytest.fixture
def result(scenario_a):
    return render({**scenario_a, "environment": "both"})


class TestWriteArtifacts:
    def test_writes_every_artifact(self, result, tmp_path):
        written = write_artifacts(result, tmp_path)
        assert [p.name for p in written] == [a.filename for a in result]
        for artifact in result:
            assert (tmp_path / artifact.filename).read_text(encoding="utf-8") == artifact.content

    def test_creates_output_directory(self, result, tmp_path):
        target = tmp_path / "deploy" / "docker"
        write_artifacts(result, target)
        assert (target / "Dockerfile").is_file()

    def test_leaves_no_staging_files(self, result, tmp_path):
        write_artifacts(result, tmp_path)
        assert not [name for name in os.listdir(tmp_path) if name.endswith(STAGING_SUFFIX)]

    def test_refuses_to_overwrite(self, result, tmp_path):
        (tmp_path / "Dockerfile").write_text("FROM scratch\n")
        with pytest.raises(ArtifactWriteError) as exc_info:
            write_artifacts(result, tmp_path)

        assert exc_info.value.conflicts == [str(tmp_path / "Dockerfile")]
        assert (tmp_path / "Dockerfile").read_text() == "FROM scratch\n"
        assert not (tmp_path / "docker-compose.yml").exists()

    def test_force_overwrites(self, result, tmp_path):
        (tmp_path / "Dockerfile").write_text("FROM scratch\n")
        write_artifacts(result, tmp_path, force=True)
        assert (tmp_path / "Dockerfile").read_text() == result.dockerfile

    def test_find_conflicts(self, result, tmp_path):
        assert find_conflicts(result, tmp_path) == []
        (tmp_path / ".dockerignore").write_text("")
        assert find_conflicts(result, tmp_path) == [tmp_path / ".dockerignore"]

    def test_refuses_to_replace_directory(self, result, tmp_path):
        (tmp_path / ".env.example").mkdir()
        with pytest.raises(ArtifactWriteError, match="Cannot overwrite directory"):
            write_artifacts(result, tmp_path, force=True)
        assert sorted(os.listdir(tmp_path)) == [".env.example"]


def _fail_on_call(monkeypatch, failing_call):
    """Make the n-th ``os.replace`` call inside the writer raise OSError."""
    real_replace = os.replace
    calls = {"count": 0}

    def replace(src, dst):
        calls["count"] += 1
        if calls["count"] == failing_call:
            raise OSError("disk full")
        return real_replace(src, dst)

    monkeypatch.setattr(writer.os, "replace", replace)


class TestWriteFailure:
    """A failed write leaves the output directory as it was"""

    def test_new_files_removed(self, result, tmp_path, monkeypatch):
        _fail_on_call(monkeypatch, 3)

        with pytest.raises(ArtifactWriteError, match="Failed to write"):
            write_artifacts(result, tmp_path)
        assert os.listdir(tmp_path) == []

    def test_existing_files_restored(self, result, tmp_path, monkeypatch):
        (tmp_path / "Dockerfile").write_text("FROM scratch\n")
        # Call 1 sets the old Dockerfile aside, calls 2-3 move new files in
        _fail_on_call(monkeypatch, 3)

        with pytest.raises(ArtifactWriteError):
            write_artifacts(result, tmp_path, force=True)
        assert os.listdir(tmp_path) == ["Dockerfile"]
        assert (tmp_path / "Dockerfile").read_text() == "FROM scratch\n"

    def test_staging_failure(self, result, tmp_path, monkeypatch):
        real_write_text = writer.Path.write_text

        def write_text(self, data, *args, **kwargs):
            if self.name.startswith(".env.example"):
                raise OSError("read-only file system")
            return real_write_text(self, data, *args, **kwargs)

        monkeypatch.setattr(writer.Path, "write_text", write_text)

        with pytest.raises(ArtifactWriteError):
            write_artifacts(result, tmp_path)
        assert os.listdir(tmp_path) == []

    def test_success_removes_backups(self, result, tmp_path):
        (tmp_path / "Dockerfile").write_text("FROM scratch\n")
        write_artifacts(result, tmp_path, force=True)
        assert not [name for name in os.listdir(tmp_path) if name.endswith(BACKUP_SUFFIX)]
