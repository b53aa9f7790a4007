"""Tests for directory listing strategies."""

from pathlib import Path

import pytest

from notectl.infrastructure.listing import get_listing, is_hidden, list_flat, list_recursive


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / ".hidden.txt").write_text("")
    (tmp_path / "#lock.txt#").write_text("")
    (tmp_path / "backup.txt~").write_text("")
    sub = tmp_path / "economics"
    sub.mkdir()
    (sub / "c.txt").write_text("")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config").write_text("")
    return tmp_path


class TestIsHidden:
    @pytest.mark.parametrize("name", [".x", "#x#", "x~"])
    def test_hidden(self, name: str) -> None:
        assert is_hidden(name)

    def test_visible(self) -> None:
        assert not is_hidden("20201008_093000----note.txt")


class TestFlat:
    def test_direct_visible_files_only(self, tree: Path) -> None:
        assert [p.name for p in list_flat(tree)] == ["a.txt", "b.txt"]


class TestRecursive:
    def test_walks_visible_subdirectories(self, tree: Path) -> None:
        names = [p.relative_to(tree).as_posix() for p in list_recursive(tree)]
        assert names == ["a.txt", "b.txt", "economics/c.txt"]


class TestGetListing:
    def test_known(self) -> None:
        assert get_listing("flat") is list_flat
        assert get_listing("recursive") is list_recursive

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown listing strategy"):
            get_listing("index")
