"""
Tests for folder listing and tree printing.
"""

import io
from pathlib import Path

import pytest

from easy_io.operations.listing import list_folder_contents
from easy_io.operations.save import save_string_to_file
from easy_io.operations.tree import print_folder_tree, write_folder_tree


@pytest.fixture
def sample_folder(tmp_path):
    """A folder with two files and a subfolder holding a third."""
    save_string_to_file("Content 1", tmp_path / "file1.txt")
    save_string_to_file("Content 2", tmp_path / "file2.txt")
    save_string_to_file("Content 3", tmp_path / "subfolder" / "file3.txt")
    return tmp_path


class TestListFolderContents:
    """Test list_folder_contents."""

    @pytest.mark.parametrize("as_type", [str, Path])
    def test_list_folder_contents(self, sample_folder, as_type):
        contents = list_folder_contents(as_type(sample_folder))

        assert contents == [
            sample_folder / "file1.txt",
            sample_folder / "file2.txt",
            sample_folder / "subfolder",
        ]

    def test_sorted_lexicographically(self, tmp_path):
        for name in ["b.txt", "C.txt", "a.txt", "a10.txt", "a2.txt"]:
            save_string_to_file("x", tmp_path / name)

        names = [p.name for p in list_folder_contents(tmp_path)]

        assert names == ["C.txt", "a.txt", "a10.txt", "a2.txt", "b.txt"]

    def test_empty_folder(self, tmp_path):
        assert list_folder_contents(tmp_path) == []

    def test_not_a_folder(self, tmp_path):
        file_path = tmp_path / "file.txt"
        save_string_to_file("x", file_path)

        with pytest.raises(NotADirectoryError):
            list_folder_contents(file_path)

    def test_missing_folder(self, tmp_path):
        with pytest.raises(IOError):
            list_folder_contents(tmp_path / "missing")


class TestFolderTree:
    """Test write_folder_tree and print_folder_tree."""

    def test_write_folder_tree(self, sample_folder):
        output = io.StringIO()

        write_folder_tree(sample_folder, output)

        assert output.getvalue() == (
            f"{sample_folder}\n"
            "├── file1.txt\n"
            "├── file2.txt\n"
            "└── subfolder\n"
            "    └── file3.txt\n"
        )

    def test_continuation_bars(self, tmp_path):
        save_string_to_file("x", tmp_path / "a" / "inner.txt")
        save_string_to_file("x", tmp_path / "a" / "deep" / "leaf.txt")
        save_string_to_file("x", tmp_path / "b.txt")
        output = io.StringIO()

        write_folder_tree(tmp_path, output)

        assert output.getvalue() == (
            f"{tmp_path}\n"
            "├── a\n"
            "│   ├── deep\n"
            "│   │   └── leaf.txt\n"
            "│   └── inner.txt\n"
            "└── b.txt\n"
        )

    def test_empty_folder(self, tmp_path):
        output = io.StringIO()

        write_folder_tree(tmp_path, output)

        assert output.getvalue() == f"{tmp_path}\n"

    def test_print_folder_tree(self, sample_folder, capsys):
        print_folder_tree(sample_folder)

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            str(sample_folder),
            "├── file1.txt",
            "├── file2.txt",
            "└── subfolder",
            "    └── file3.txt",
        ]

    def test_not_a_folder(self, tmp_path):
        file_path = tmp_path / "file.txt"
        save_string_to_file("x", file_path)

        with pytest.raises(NotADirectoryError):
            write_folder_tree(file_path, io.StringIO())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
