"""A text-mode file browser built on :class:`FileManager`."""

from __future__ import annotations

import argparse
import os
import sys

from filebrowse.manager import (
    DirectoryNode,
    FileItem,
    FileManager,
    format_file_size,
    format_file_time,
)

DEFAULT_PATH = "C:\\" if os.name == "nt" else "/"
TITLE = "文件浏览器"
DIR_SIZE = "<DIR>"
DIR_TYPE = "文件夹"


def _row(name: str, size: str, kind: str, when: str, marker: str = " ") -> str:
    return f"{marker} {name:<32} {size:>12}  {kind:<12} {when}".rstrip()


class FileBrowser:
    """Tracks the current directory, its contents, a filter and a selection."""

    def __init__(self, manager: FileManager | None = None, path: str | None = None):
        self.manager = manager if manager is not None else FileManager()
        self.current_path = path if path is not None else DEFAULT_PATH
        self.current_files: list[FileItem] = self.manager.files(self.current_path)
        self.current_dirs: list[DirectoryNode] = self.manager.subdirectories(
            self.current_path
        )
        self.selected_index: int | None = None
        self.search_filter = ""

    def change_directory(self, new_path: str) -> None:
        """Make ``new_path`` current and reload its contents."""
        self.current_path = new_path
        self.refresh()

    def refresh(self) -> None:
        """Re-read the current directory and clear the selection."""
        self.current_files = []
        self.current_dirs = []
        try:
            self.manager.refresh_directory(self.current_path)
        except OSError:
            pass
        self.current_files = self.manager.files(self.current_path)
        self.current_dirs = self.manager.subdirectories(self.current_path)
        self.selected_index = None

    def can_navigate_up(self) -> bool:
        """True unless the current path is a filesystem root."""
        return bool(self.current_path) and os.path.dirname(self.current_path) != self.current_path

    def navigate_up(self) -> None:
        """Move to the parent directory, if there is one."""
        if self.can_navigate_up():
            self.change_directory(os.path.dirname(self.current_path))

    def _matches(self, name: str) -> bool:
        return not self.search_filter or self.search_filter.lower() in name.lower()

    def visible_directories(self) -> list[DirectoryNode]:
        """Subdirectories whose names contain the search filter."""
        return [
            d for d in self.current_dirs if d.name and d.path and self._matches(d.name)
        ]

    def visible_files(self) -> list[FileItem]:
        """Files whose names contain the search filter."""
        return [f for f in self.current_files if self._matches(f.file_name)]

    def select(self, index: int) -> FileItem:
        """Select the file at ``index`` in the current listing."""
        if not 0 <= index < len(self.current_files):
            raise IndexError(f"no file at index {index}")
        self.selected_index = index
        return self.current_files[index]

    @property
    def selected_file(self) -> FileItem | None:
        if self.selected_index is None:
            return None
        return self.current_files[self.selected_index]

    def render(self) -> str:
        """Draw the window as text."""
        lines = [TITLE, f"路径: {self.current_path}"]
        if self.search_filter:
            lines.append(f"搜索: {self.search_filter}")
        header = _row("名称", "大小", "类型", "修改时间")
        lines.append(header)
        lines.append("-" * len(header))
        if self.can_navigate_up():
            lines.append(_row("..", DIR_SIZE, DIR_TYPE, ""))
        for directory in self.visible_directories():
            lines.append(_row(directory.name, DIR_SIZE, DIR_TYPE, ""))
        for index, item in enumerate(self.current_files):
            if not self._matches(item.file_name):
                continue
            marker = "*" if index == self.selected_index else " "
            lines.append(
                _row(
                    item.file_name,
                    format_file_size(item.size),
                    item.file_type,
                    format_file_time(item.modified),
                    marker,
                )
            )
        return "\n".join(lines)


_HELP = (
    "commands: cd <name|path>, up, refresh, filter [text], select <n>, "
    "drives, help, quit"
)


def _resolve(browser: FileBrowser, target: str) -> str:
    for directory in browser.current_dirs:
        if directory.name == target:
            return directory.path
    if target == "..":
        return os.path.dirname(browser.current_path)
    return target


def _interact(browser: FileBrowser) -> None:
    print(browser.render())
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        command, _, argument = line.strip().partition(" ")
        argument = argument.strip()
        if command in ("quit", "exit", "q"):
            break
        if command == "cd" and argument:
            browser.change_directory(_resolve(browser, argument))
        elif command == "up":
            browser.navigate_up()
        elif command == "refresh":
            browser.refresh()
        elif command == "filter":
            browser.search_filter = argument
        elif command == "select" and argument:
            try:
                browser.select(int(argument))
            except (ValueError, IndexError) as exc:
                print(exc)
                continue
        elif command == "drives":
            print("\n".join(browser.manager.drives()))
            continue
        else:
            print(_HELP)
            continue
        print(browser.render())


def main(argv=None) -> int:
    """Show a directory listing, optionally browsing interactively."""
    parser = argparse.ArgumentParser(prog="filebrowse", description="Browse files.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--filter", default="", help="show only names containing this")
    parser.add_argument("-i", "--interactive", action="store_true")
    args = parser.parse_args(argv)

    browser = FileBrowser(FileManager(), args.path)
    browser.search_filter = args.filter
    if args.interactive:
        _interact(browser)
    else:
        print(browser.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())