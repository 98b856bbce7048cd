from pathlib import Path

import pytest

from untree.errors import MissingContextError, PathError
from untree.functions import (
    create_path,
    create_tree,
    get_entry,
    normalize_path,
    touch_directory,
    touch_file,
)
from untree.path_action import PathAction
from untree.types import PathKind, UntreeOptions

TREE = [
    "root\n",
    "├── src\n",
    "│   ├── main.txt\n",
    "│   └── deep\n",
    "│       └── leaf.txt\n",
    "└── readme.txt\n",
]


def _broken_lines():
    yield "a\n"
    raise OSError("read failure")


@pytest.mark.parametrize(
    "line, depth, name",
    [
        ("plain", 0, "plain"),
        ("├── foo", 1, "foo"),
        ("└── foo", 1, "foo"),
        ("│   └── bar", 2, "bar"),
        ("    ├── baz", 2, "baz"),
        ("│\u00a0\u00a0 └── nb", 2, "nb"),
    ],
)
def test_get_entry(line, depth, name):
    assert get_entry(line) == (depth, name)


def test_normalize_path_removes_dots():
    assert normalize_path("a/./b/../c") == Path("a") / "c"


def test_normalize_path_keeps_leading_parents():
    assert normalize_path("a/../../b") == Path("..") / "b"


def test_normalize_path_is_idempotent():
    once = normalize_path("x/y/../../../z/./w")
    assert normalize_path(once) == once


def test_touch_file_creates_and_preserves(tmp_path):
    target = tmp_path / "f.txt"
    touch_file(target)
    assert target.is_file()
    target.write_text("keep me")
    touch_file(target)
    assert target.read_text() == "keep me"


def test_touch_file_missing_parent_raises(tmp_path):
    with pytest.raises(PathError) as info:
        touch_file(tmp_path / "missing" / "f.txt")
    assert info.value.action is PathAction.CREATE_FILE


def test_touch_directory_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    touch_directory(target)
    assert target.is_dir()
    touch_directory(target)
    assert target.is_dir()


def test_touch_directory_over_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(PathError) as info:
        touch_directory(blocker)
    assert info.value.action is PathAction.CREATE_DIRECTORY
    assert info.value.filename == blocker


def test_create_path_verbose_prints(tmp_path, capsys):
    target = tmp_path / "dir"
    create_path(target, PathKind.DIRECTORY, UntreeOptions(verbose=True))
    out = capsys.readouterr().out
    assert "mkdir" in out
    assert str(target) in out
    assert target.is_dir()


def test_create_path_dry_run_creates_nothing(tmp_path, capsys):
    target = tmp_path / "f.txt"
    create_path(target, PathKind.FILE_PATH, UntreeOptions(dry_run=True))
    assert "touch" in capsys.readouterr().out
    assert not target.exists()


def test_create_path_quiet_by_default(tmp_path, capsys):
    target = tmp_path / "f.txt"
    create_path(target, PathKind.FILE_PATH)
    assert capsys.readouterr().out == ""
    assert target.is_file()


def test_create_tree_builds_structure(tmp_path):
    create_tree(tmp_path, TREE, UntreeOptions())
    root = tmp_path / "root"
    assert (root / "src").is_dir()
    assert (root / "src" / "main.txt").is_file()
    assert (root / "src" / "deep").is_dir()
    assert (root / "src" / "deep" / "leaf.txt").is_file()
    assert (root / "readme.txt").is_file()


def test_create_tree_dry_run(tmp_path, capsys):
    create_tree(tmp_path, TREE, UntreeOptions(dry_run=True))
    out = capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []
    assert "leaf.txt" in out


def test_create_tree_stops_at_empty_line(tmp_path):
    lines = ["top\n", "├── kept.txt\n", "\n", "└── dropped.txt\n"]
    create_tree(tmp_path, lines, UntreeOptions())
    assert (tmp_path / "top" / "kept.txt").is_file()
    assert not (tmp_path / "top" / "dropped.txt").exists()


def test_create_tree_handles_crlf(tmp_path):
    create_tree(tmp_path, ["d\r\n", "└── f.txt\r\n"], UntreeOptions())
    assert (tmp_path / "d" / "f.txt").is_file()


def test_create_tree_read_error_lacks_context(tmp_path):
    with pytest.raises(MissingContextError) as info:
        create_tree(tmp_path, _broken_lines(), UntreeOptions())
    assert str(info.value.cause) == "read failure"