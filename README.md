# untree

`untree` does the reverse of `tree`. It takes a text drawing of a directory tree and creates the files and directories that the drawing shows.

## Installation

```
pip install .
```

## Command line

Save a tree drawing to a file, for example `tree.txt`:

```
project
├── src
│   ├── main.py
│   └── util.py
└── README.md
```

Create the tree in the current directory:

```
untree tree.txt
```

Create the tree in another directory:

```
untree --dir some/place tree.txt
```

If you give no files, or you give `-` as a file name, the tree is read from standard input:

```
tree some/existing/dir | untree --dir copy
```

You can give more than one file. The files are read in turn, and each tree is created in the same root directory. Tree files are read as UTF-8. One leading backslash in a file name is removed before the file is opened.

Options:

- `-d`, `--dir DIR`: the directory that becomes the root of the new structure. The default is the current working directory.
- `--dry-run`: print the files and directories that would be created, and do not create them. This option implies `--verbose`.
- `-v`, `--verbose`: print `touch NAME` for each file and `mkdir -p NAME` for each directory as it is created.
- `-V`, `--version`: print the version and exit.

How the drawing is read:

- The depth of each line comes from its leading `tree` connectors (`├── `, `└── `, `│   `, and four spaces). The `│` form that uses non-breaking spaces is also accepted.
- A line that has indented children becomes a directory. Its missing parents are also created.
- Every other line becomes an empty file.
- A file or directory that already exists is left as it is.
- `.` and `..` in the first entry are resolved before anything is created.
- Reading stops at the first empty line after the first line. For this reason, the `N directories, M files` summary that `tree` prints is ignored.

If an error occurs, `untree` prints a description of the error to standard error and exits with status 1.

## Library use

```python
from untree.functions import create_tree
from untree.types import UntreeOptions

options = UntreeOptions().with_dry_run(True)
with open("tree.txt", encoding="utf-8") as handle:
    create_tree("some/place", handle, options)
```

`create_tree(directory, lines, options)` accepts any iterable of lines. A trailing newline on each line is removed.

`UntreeOptions` is a frozen dataclass with the fields `dry_run` and `verbose`. Use `with_dry_run()` and `with_verbose()` to get modified copies. `is_verbose()` returns true when either field is set.

Other functions in `untree.functions`:

- `get_entry(line)` returns `(depth, name)` for one line of `tree` output.
- `normalize_path(path)` folds away `.` and `..` components without using the file system. Any leading `..` components that cannot be folded are kept.
- `create_path(path, kind, options)` creates one file or one directory, chosen by `PathKind.FILE_PATH` or `PathKind.DIRECTORY`.
- `touch_file(path)` creates an empty file if the file does not exist yet.
- `touch_directory(path)` creates a directory and its parents.

To run the command from code, call `untree.cli.main(argv)`. It returns the exit status. `untree.cli.run(directory, tree_files, options)` does the work and raises errors instead of printing them.

## Errors

All errors are subclasses of `untree.errors.UntreeError`. The underlying exception is stored in `cause`.

- `PathError` carries `filename` and a `PathAction`: `CREATE_FILE`, `CREATE_DIRECTORY`, `OPEN_FILE_FOR_READING` or `READ_FILE`.
- `StdinError` marks a failure while reading standard input.
- `MissingContextError` marks a read failure whose source is not yet known. `more_context(info)` turns it into a `StdinError` when given `READ_STDIN`, or into a `PathError` when given `(path, action)`. The other error classes return themselves unchanged.