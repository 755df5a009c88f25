import os
import re
from datetime import datetime, timezone

import pytest

from filebrowse.manager import (
    FileManager,
    file_type_from_extension,
    format_file_size,
    format_file_time,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_bytes(b"0123456789")
    (tmp_path / "A.log").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    (tmp_path / "Zed").mkdir()
    (tmp_path / "sub" / "inner.dat").write_bytes(b"xyz")
    return tmp_path


def test_files_lists_regular_files_sorted(tree):
    manager = FileManager()
    names = [item.file_name for item in manager.files(str(tree))]
    assert names == ["A.log", "b.txt"]


def test_file_item_details(tree):
    manager = FileManager()
    item = {i.file_name: i for i in manager.files(str(tree))}["b.txt"]
    assert item.size == 10
    assert item.full_path == os.path.join(str(tree), "b.txt")
    assert item.is_directory is False
    assert item.file_type == file_type_from_extension("b.txt")
    assert item.modified == pytest.approx(os.stat(tree / "b.txt").st_mtime)


def test_subdirectories(tree):
    manager = FileManager()
    subs = manager.subdirectories(str(tree))
    assert [s.name for s in subs] == ["sub", "Zed"]
    assert subs[0].path == os.path.join(str(tree), "sub")
    assert all(not s.is_loaded and s.files == [] for s in subs)


def test_load_directory_node(tree):
    manager = FileManager()
    node = manager.load_directory(str(tree))
    assert node.is_loaded is True
    assert node.name == tree.name
    assert node.path == str(tree)


def test_cache_until_refresh(tree):
    manager = FileManager()
    path = str(tree)
    manager.load_directory(path)
    (tree / "new.bin").write_bytes(b"1")
    assert "new.bin" not in [i.file_name for i in manager.files(path)]
    manager.refresh_directory(path)
    assert "new.bin" in [i.file_name for i in manager.files(path)]


def test_invalid_paths(tree):
    manager = FileManager()
    missing = str(tree / "missing")
    with pytest.raises(NotADirectoryError):
        manager.load_directory(missing)
    with pytest.raises(NotADirectoryError):
        manager.load_directory("")
    with pytest.raises(NotADirectoryError):
        manager.load_directory(str(tree / "b.txt"))
    assert manager.files(missing) == []
    assert manager.subdirectories(missing) == []


def test_drives():
    manager = FileManager()
    assert manager.load_drives() is True
    drives = manager.drives()
    assert drives
    assert all(os.path.isdir(d) for d in drives)


def test_delete_file(tree):
    manager = FileManager()
    target = tree / "b.txt"
    manager.delete_file(str(target))
    assert not target.exists()
    with pytest.raises(FileNotFoundError):
        manager.delete_file(str(target))


def test_copy_file_overwrites(tree):
    manager = FileManager()
    dst = tree / "A.log"
    manager.copy_file(str(tree / "b.txt"), str(dst))
    assert dst.read_bytes() == b"0123456789"
    assert (tree / "b.txt").exists()


def test_copy_file_into_directory_fails(tree):
    manager = FileManager()
    with pytest.raises(IsADirectoryError):
        manager.copy_file(str(tree / "b.txt"), str(tree / "sub"))


def test_move_file(tree):
    manager = FileManager()
    dst = tree / "sub" / "moved.txt"
    manager.move_file(str(tree / "b.txt"), str(dst))
    assert dst.read_bytes() == b"0123456789"
    assert not (tree / "b.txt").exists()


def test_move_file_refuses_existing(tree):
    manager = FileManager()
    with pytest.raises(FileExistsError):
        manager.move_file(str(tree / "b.txt"), str(tree / "A.log"))
    assert (tree / "b.txt").read_bytes() == b"0123456789"


def test_format_size_bytes():
    assert format_file_size(512).split() == ["512", "B"]
    assert format_file_size(1023).endswith(" B")


def test_format_size_units():
    assert format_file_size(1024) == "1.00 KB"
    assert re.fullmatch(r"\d+\.\d\d MB", format_file_size(5 * 1024**2))
    assert format_file_size(3 * 1024**3).endswith(" GB")


def test_format_size_caps_at_terabytes():
    assert format_file_size(1024**5) == "1024.00 TB"


def test_format_time_epoch():
    assert format_file_time(0) == "1970-01-01 00:00"


def test_format_time_round_trip():
    moment = datetime(2021, 3, 4, 5, 6, tzinfo=timezone.utc)
    text = format_file_time(moment.timestamp())
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M").replace(tzinfo=timezone.utc)
    assert parsed == moment


def test_format_time_invalid():
    assert format_file_time(float("nan")) == "Unknown"
    assert format_file_time(1e20) == "Unknown"


def test_file_type_without_extension():
    assert file_type_from_extension("README") == "文件"
    assert file_type_from_extension("trailing.") == "文件"


def test_file_type_uses_last_extension_upper():
    assert file_type_from_extension("a.txt") == file_type_from_extension("b.TXT")
    result = file_type_from_extension("archive.tar.gz")
    assert result.startswith("GZ ")
    assert result.endswith(" 文件")