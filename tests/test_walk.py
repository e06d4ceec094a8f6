"""
Tests for the recursive directory walker.
"""

import os
from pathlib import Path
from types import GeneratorType

import pytest

from easy_io.operations.save import save_string_to_file
from easy_io.operations.walk import walk_folder


@pytest.fixture
def tree(tmp_path):
    save_string_to_file("1", tmp_path / "top.txt")
    save_string_to_file("2", tmp_path / "a" / "a1.txt")
    save_string_to_file("3", tmp_path / "a" / "b" / "b1.txt")
    (tmp_path / "empty").mkdir()
    return tmp_path


class TestWalkFolder:
    """Test walk_folder."""

    def test_yields_every_descendant(self, tree):
        entries = set(walk_folder(tree))

        assert entries == {
            tree / "top.txt",
            tree / "a",
            tree / "a" / "a1.txt",
            tree / "a" / "b",
            tree / "a" / "b" / "b1.txt",
            tree / "empty",
        }

    def test_root_not_yielded(self, tree):
        assert tree not in list(walk_folder(tree))

    def test_pre_order(self, tree):
        """Every folder comes before anything inside it."""
        entries = list(walk_folder(tree))

        for index, entry in enumerate(entries):
            for parent in entry.relative_to(tree).parents:
                if parent != Path("."):
                    assert entries.index(tree / parent) < index

    def test_depth_first(self, tree):
        """A folder's contents follow it before any of its later siblings."""
        entries = list(walk_folder(tree))
        a_index = entries.index(tree / "a")
        a_descendants = [e for e in entries if (tree / "a") in e.parents]

        block = entries[a_index + 1:a_index + 1 + len(a_descendants)]
        assert sorted(block) == sorted(a_descendants)

    def test_is_lazy(self, tree):
        walker = walk_folder(tree)

        assert isinstance(walker, GeneratorType)
        assert next(walker) in set(walk_folder(tree))

    def test_restartable(self, tree):
        assert sorted(walk_folder(tree)) == sorted(walk_folder(tree))

    def test_string_root(self, tree):
        assert set(walk_folder(str(tree))) == set(walk_folder(tree))

    def test_missing_root(self, tmp_path):
        assert list(walk_folder(tmp_path / "missing")) == []

    def test_file_root(self, tmp_path):
        file_path = tmp_path / "file.txt"
        save_string_to_file("x", file_path)

        assert list(walk_folder(file_path)) == []

    def test_skips_folder_deleted_mid_walk(self, tree):
        seen = []
        for entry in walk_folder(tree):
            seen.append(entry)
            if entry == tree / "a":
                # Children sort after their parents, so reverse order empties folders first
                for path in sorted((tree / "a").rglob("*"), reverse=True):
                    if path.is_file():
                        path.unlink()
                    else:
                        path.rmdir()

        assert tree / "a" / "a1.txt" not in seen
        assert tree / "top.txt" in seen

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_does_not_follow_symlinked_folders(self, tree):
        link = tree / "link"
        try:
            link.symlink_to(tree / "a", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")

        entries = list(walk_folder(tree))

        assert link in entries
        assert link / "a1.txt" not in entries


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
