[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filebrowse"
version = "0.1.0"
description = "A file browser with cached directory listings, a filterable file view and a text-mode command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "file browser", "directory listing", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filebrowse = "filebrowse.browser:main"

[tool.hatch.build.targets.wheel]
packages = ["filebrowse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
