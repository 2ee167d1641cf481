"""
Tests unitaires pour FileSystemAdapter sur un vrai systeme de fichiers.
"""

from pathlib import Path

import pytest

from media_renamer.adapters.file_system import FileSystemAdapter


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "downloads" / "Conclave.2024.mkv"
    path.parent.mkdir()
    path.write_bytes(b"video")
    return path


class TestFileSystemAdapter:
    """Tests des operations de FileSystemAdapter."""

    def test_exists(self, adapter: FileSystemAdapter, source: Path) -> None:
        assert adapter.exists(source)
        assert not adapter.exists(source.with_name("missing.mkv"))

    def test_broken_symlink_counts_as_existing(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        link = tmp_path / "broken.mkv"
        link.symlink_to(tmp_path / "nowhere.mkv")

        assert adapter.exists(link)

    def test_ensure_parent_creates_all_levels(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        destination = tmp_path / "TV" / "Andor" / "Season 1" / "Andor - s01e01.mkv"

        adapter.ensure_parent(destination)

        assert destination.parent.is_dir()
        assert not destination.exists()

    def test_move(self, adapter: FileSystemAdapter, source: Path, tmp_path: Path) -> None:
        destination = tmp_path / "moved.mkv"

        adapter.move(source, destination)

        assert destination.read_bytes() == b"video"
        assert not source.exists()

    def test_copy_keeps_source(
        self, adapter: FileSystemAdapter, source: Path, tmp_path: Path
    ) -> None:
        destination = tmp_path / "copied.mkv"

        adapter.copy(source, destination)

        assert destination.read_bytes() == b"video"
        assert source.exists()

    def test_symlink_points_to_absolute_source(
        self,
        adapter: FileSystemAdapter,
        source: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(source.parent)
        destination = tmp_path / "linked.mkv"

        adapter.symlink(Path(source.name), destination)

        assert destination.is_symlink()
        assert destination.readlink().is_absolute()
        assert destination.read_bytes() == b"video"

    def test_symlink_to_missing_source_raises(
        self, adapter: FileSystemAdapter, tmp_path: Path
    ) -> None:
        with pytest.raises(OSError):
            adapter.symlink(tmp_path / "missing.mkv", tmp_path / "link.mkv")

    def test_copy_to_missing_directory_raises(
        self, adapter: FileSystemAdapter, source: Path, tmp_path: Path
    ) -> None:
        with pytest.raises(OSError):
            adapter.copy(source, tmp_path / "missing" / "copied.mkv")
