"""Directory listing, caching and basic file operations."""

from __future__ import annotations

import errno
import os
import shutil
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_FILE_LABEL = "文件"
UNKNOWN_TIME = "Unknown"


@dataclass
class FileItem:
    """A regular file found in a directory listing."""

    file_name: str
    full_path: str
    size: int = 0
    attributes: int = 0
    created: float = 0.0
    modified: float = 0.0
    is_directory: bool = False
    file_type: str = ""


@dataclass
class DirectoryNode:
    """A directory together with its listed contents."""

    path: str
    name: str
    subdirs: list[DirectoryNode] = field(default_factory=list)
    files: list[FileItem] = field(default_factory=list)
    is_loaded: bool = False


def format_file_size(size: int) -> str:
    """Render a byte count with a binary unit, e.g. ``1.50 KB``."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {_SIZE_UNITS[0]}"
    return f"{value:.2f} {_SIZE_UNITS[unit]}"


def format_file_time(timestamp: float) -> str:
    """Render a POSIX timestamp as ``YYYY-MM-DD HH:MM`` in UTC."""
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIME
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def file_type_from_extension(file_name: str) -> str:
    """Describe a file by its upper-cased extension."""
    stem, dot, ext = file_name.rpartition(".")
    if dot and ext:
        return f"{ext.upper()} {_FILE_LABEL}"
    return _FILE_LABEL


def _list_drives() -> list[str]:
    if os.name == "nt":
        roots = (f"{letter}:\\" for letter in string.ascii_uppercase)
        return [root for root in roots if os.path.isdir(root)]
    return [os.path.abspath(os.sep)]


def _stat_entry(entry: os.DirEntry) -> os.stat_result:
    try:
        return entry.stat()
    except OSError:
        return entry.stat(follow_symlinks=False)


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _file_item(entry: os.DirEntry, full_path: str) -> FileItem:
    info = _stat_entry(entry)
    return FileItem(
        file_name=entry.name,
        full_path=full_path,
        size=info.st_size,
        attributes=getattr(info, "st_file_attributes", info.st_mode),
        created=getattr(info, "st_birthtime", info.st_ctime),
        modified=info.st_mtime,
        is_directory=False,
        file_type=file_type_from_extension(entry.name),
    )


def _enumerate(path: str, node: DirectoryNode) -> None:
    with os.scandir(path) as listing:
        entries = sorted(listing, key=lambda entry: entry.name.casefold())
    for entry in entries:
        if not entry.name:
            continue
        full_path = os.path.join(path, entry.name)
        if _is_directory(entry):
            node.subdirs.append(DirectoryNode(path=full_path, name=entry.name))
        else:
            node.files.append(_file_item(entry, full_path))


class FileManager:
    """Lists drives and directories, caching each directory once loaded."""

    def __init__(self):
        self._cache: dict[str, DirectoryNode] = {}
        self._drives: list[str] = []
        self.load_drives()

    def load_drives(self) -> bool:
        """Rescan the available drive roots; true if any were found."""
        self._drives = _list_drives()
        return bool(self._drives)

    def load_directory(self, path: str) -> DirectoryNode:
        """Return the listing of ``path``, reading it on first use."""
        if not path or not os.path.isdir(path):
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        cached = self._cache.get(path)
        if cached is not None and cached.is_loaded:
            return cached
        node = DirectoryNode(path=path, name=os.path.basename(path))
        _enumerate(path, node)
        node.is_loaded = True
        self._cache[path] = node
        return node

    def refresh_directory(self, path: str) -> DirectoryNode:
        """Drop any cached listing of ``path`` and read it again."""
        self._cache.pop(path, None)
        return self.load_directory(path)

    def drives(self) -> list[str]:
        """The drive roots found by the last scan."""
        return list(self._drives)

    def files(self, path: str) -> list[FileItem]:
        """Files in ``path``; empty if it cannot be listed."""
        try:
            node = self.load_directory(path)
        except OSError:
            return []
        return list(node.files)

    def subdirectories(self, path: str) -> list[DirectoryNode]:
        """Subdirectories of ``path``; empty if it cannot be listed."""
        try:
            node = self.load_directory(path)
        except OSError:
            return []
        return [sub for sub in node.subdirs if sub.name and sub.path]

    def delete_file(self, file_path: str) -> None:
        """Delete a single file."""
        os.remove(file_path)

    def copy_file(self, src: str, dst: str) -> None:
        """Copy a file, replacing ``dst`` if it already exists."""
        if os.path.isdir(dst):
            raise IsADirectoryError(errno.EISDIR, "Is a directory", dst)
        shutil.copy2(src, dst)

    def move_file(self, src: str, dst: str) -> None:
        """Move or rename a file or directory; ``dst`` must not exist."""
        if os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, "File exists", dst)
        shutil.move(src, dst)