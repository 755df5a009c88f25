# filebrowse

A small file browser with two modules:

- `filebrowse.manager` finds the drive roots on the machine. It reads directory listings and caches them, and it can delete, copy and move files.
- `filebrowse.browser` tracks one current directory at a time and draws it as text. It lists subdirectories first and then files. Each file row shows its size, type and modification time. A case-insensitive name filter can be applied, and one file can be selected.

## Installation

```
pip install .
```

## Command line

```
filebrowse [PATH] [--filter TEXT] [-i | --interactive]
```

With no options, the command prints the listing of `PATH` and exits. When `PATH` is left out, it starts in `C:\` on Windows and in `/` everywhere else. `--filter TEXT` shows only the entries whose names contain `TEXT`, ignoring case.

`-i` / `--interactive` keeps the browser open and reads commands from standard input. After each command that changes the view, the listing is printed again.

| command | effect |
| --- | --- |
| `cd <name\|path>` | enter a subdirectory by name, `..`, or any path |
| `up` | go to the parent directory |
| `refresh` | re-read the current directory |
| `filter [text]` | set the name filter; with no text, clear it |
| `select <n>` | mark the file at index `n` of the current listing |
| `drives` | print the drive roots |
| `help` | print the command list |
| `quit`, `exit`, `q` | leave; end of input also leaves |

## Library use

```python
from filebrowse.manager import FileManager, format_file_size, file_type_from_extension
from filebrowse.browser import FileBrowser

manager = FileManager()
print(manager.drives())

for item in manager.files("/tmp"):
    print(item.file_name, format_file_size(item.size), item.file_type)

browser = FileBrowser(manager, "/tmp")
browser.search_filter = "log"
for directory in browser.visible_directories():
    print("<DIR>", directory.name)
for item in browser.visible_files():
    print(item.file_name)

if browser.can_navigate_up():
    browser.navigate_up()
print(browser.render())
```

### Data types

- `FileItem` has the fields `file_name`, `full_path`, `size` (bytes), `attributes`, `created`, `modified` (POSIX timestamps), `is_directory` and `file_type`.
- `DirectoryNode` has the fields `path`, `name`, `subdirs`, `files` and `is_loaded`.

Entries in a listing are sorted by name, ignoring case.

### Directory cache

- `FileManager.load_directory(path)` reads a directory the first time it is asked for. It caches the result and returns the `DirectoryNode`. If `path` is empty or is not a directory, it raises `NotADirectoryError`.
- `refresh_directory(path)` drops the cached entry and reads the directory again.
- `files(path)` and `subdirectories(path)` return the listing. They return an empty list when the path cannot be listed.
- `load_drives()` scans the drive roots again. On Windows these are the lettered drives that exist; elsewhere it is the filesystem root. `drives()` returns the result of the last scan.

### File operations

These methods return nothing. On failure they raise `OSError`, or one of its subclasses.

- `delete_file(path)` removes a single file.
- `copy_file(src, dst)` copies the file with its metadata and overwrites an existing destination file. It raises `IsADirectoryError` if `dst` is a directory.
- `move_file(src, dst)` moves or renames a file or directory. It raises `FileExistsError` if `dst` already exists.

### Browser

`FileBrowser(manager=None, path=None)` creates its own `FileManager` and starts at the default path when those are not given. It provides:

- `change_directory`, `refresh`, `navigate_up` and `can_navigate_up`. `can_navigate_up` is false at a filesystem root.
- `visible_directories()` and `visible_files()` return the entries that pass `search_filter`.
- `select(index)` selects a file by its index in the unfiltered file list. It raises `IndexError` when there is no file at that index. The selection is available as `selected_file` and is cleared on every refresh.
- `render()` returns the whole view as a string.

### Formatting helpers

- `format_file_size(2048)` returns `"2.00 KB"`. Sizes under 1024 bytes are shown as whole bytes, and the largest unit is TB.
- `format_file_time(timestamp)` returns `YYYY-MM-DD HH:MM` in UTC, or `"Unknown"` for a timestamp that cannot be converted.
- `file_type_from_extension("notes.txt")` returns `"TXT 文件"`. A name with no extension returns `"文件"`.

## What it does not do

There is no graphical window, clickable tree or mouse selection. The view is drawn as plain text, and you browse it through the command line or the `FileBrowser` methods. The directory tree is not drawn either. `subdirectories(path)` gives you the children of any directory so you can walk the tree yourself.