"""Parsing of tree output and creation of the described files and folders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from termcolor import colored

from .errors import MissingContextError, PathError
from .path_action import PathAction
from .types import PathKind, UntreeOptions

_PREFIXES = (
    "    ",
    "└── ",
    "├── ",
    "│   ",
    # Some implementations of tree use non-breaking spaces here
    "│\u00a0\u00a0 ",
)


def get_entry(entry: str) -> tuple[int, str]:
    """Split a tree line into its depth and the name it names."""
    depth = 0
    while True:
        prefix = next((p for p in _PREFIXES if entry.startswith(p)), None)
        if prefix is None:
            return depth, entry
        entry = entry[len(prefix):]
        depth += 1


def touch_file(path: str | PathLike[str]) -> None:
    """Create a file if it does not exist; an existing file is left untouched."""
    try:
        with open(path, "x"):
            pass
    except FileExistsError:
        pass
    except OSError as err:
        raise PathError(path, PathAction.CREATE_FILE, err) from err


def touch_directory(path: str | PathLike[str]) -> None:
    """Create a directory along with any missing parents."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise PathError(path, PathAction.CREATE_DIRECTORY, err) from err


def create_path(
    path: str | PathLike[str],
    kind: PathKind,
    options: UntreeOptions | None = None,
) -> None:
    """Create a file or directory, describing it if the options ask for that."""
    options = options or UntreeOptions()
    name = str(path)

    if options.is_verbose():
        if kind is PathKind.FILE_PATH:
            print(
                colored("touch", "green", attrs=["bold"]),
                colored(name, "white", attrs=["bold"]),
            )
        else:
            print(
                colored("mkdir", "green", attrs=["bold"]),
                "-p",
                colored(name, "blue", attrs=["bold"]),
            )

    if options.dry_run:
        return
    if kind is PathKind.FILE_PATH:
        touch_file(path)
    else:
        touch_directory(path)


def normalize_path(path: str | PathLike[str]) -> Path:
    """Resolve '.' and '..' components lexically, keeping leading '..'s."""
    pure = Path(path)
    min_parts = 1 if pure.anchor else 0
    parts: list[str] = []
    go_back = 0
    for component in pure.parts:
        if component == ".":
            continue
        if component == "..":
            if len(parts) > min_parts:
                parts.pop()
            else:
                go_back += 1
        else:
            parts.append(component)
    return Path(*([".."] * go_back), *parts)


def _set_file_name(path: Path, name: str) -> Path:
    if path.name and path.name != "..":
        return path.parent / name
    return path / name


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as err:
            raise MissingContextError(err) from err
        yield _strip_newline(line)


def create_tree(
    directory: str | PathLike[str],
    lines: Iterable[str],
    options: UntreeOptions | None = None,
) -> None:
    """Create, inside ``directory``, the tree described by ``lines``.

    Reading stops at the first empty line after the first one.
    """
    options = options or UntreeOptions()
    path = Path(directory)
    old_depth = 0
    reader = _read_lines(lines)

    first = next(reader, None)
    if first is not None:
        depth, filename = get_entry(first)
        path = normalize_path(path / filename)
        old_depth = depth

    for line in reader:
        if not line:
            break
        depth, filename = get_entry(line)
        if depth <= old_depth:
            create_path(path, PathKind.FILE_PATH, options)
            for _ in range(old_depth - depth):
                path = path.parent
            path = _set_file_name(path, filename)
        else:
            create_path(path, PathKind.DIRECTORY, options)
            path = path / filename
        old_depth = depth

    create_path(path, PathKind.FILE_PATH, options)