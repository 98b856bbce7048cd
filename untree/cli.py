"""Command-line entry point: build directory trees from tree listings."""

from __future__ import annotations

import argparse
import shutil
import sys
import textwrap
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from termcolor import colored

from .errors import (
    READ_STDIN,
    MissingContextError,
    PathError,
    StdinError,
    UntreeError,
)
from .functions import create_tree
from .path_action import PathAction
from .types import UntreeOptions

_VERSION = "0.9.10"


def _bold(text: str) -> str:
    return colored(text, attrs=["bold"])


def _with_context(err: UntreeError, info) -> UntreeError:
    return err.more_context(info)


def _read_from_stdin(directory: Path, options: UntreeOptions) -> None:
    print(_bold("Reading tree from standard input"), file=sys.stderr)
    try:
        create_tree(directory, sys.stdin, options)
    except UntreeError as err:
        raise _with_context(err, READ_STDIN) from err.cause


def _read_from_file(
    directory: Path, filename: str, options: UntreeOptions
) -> None:
    path = Path(filename[1:] if filename.startswith("\\") else filename)
    try:
        handle = open(path, encoding="utf-8")
    except OSError as err:
        raise PathError(path, PathAction.OPEN_FILE_FOR_READING, err) from err
    with handle:
        print(_bold(f"Reading tree from file '{filename}'"), file=sys.stderr)
        try:
            create_tree(directory, handle, options)
        except UntreeError as err:
            raise _with_context(
                err, PathAction.READ_FILE.on(path)
            ) from err.cause


def run(
    directory: str | PathLike[str] | None,
    tree_files: Sequence[str | PathLike[str]],
    options: UntreeOptions,
) -> None:
    """Create the trees described by ``tree_files`` inside ``directory``.

    With no tree files, the tree is read from standard input; a file named
    ``-`` also stands for standard input.
    """
    root = Path(directory) if directory is not None else Path("")
    if not tree_files:
        _read_from_stdin(root, options)
        return
    for tree_file in tree_files:
        filename = str(tree_file)
        if filename == "-":
            _read_from_stdin(root, options)
        else:
            _read_from_file(root, filename, options)


def _describe_cause(cause: BaseException) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


def _print_error(message: str, cause: BaseException) -> None:
    text = f"{message}\n\nCause: {_describe_cause(cause)}"
    width = max(shutil.get_terminal_size().columns - 4, 20)
    wrapped = "\n".join(
        textwrap.fill(line, width) if line else ""
        for line in text.split("\n")
    )
    body = textwrap.indent(wrapped, "    ")
    header = colored("ERROR:", "red", attrs=["bold"])
    print(file=sys.stderr)
    print(header, file=sys.stderr)
    print(body, file=sys.stderr)
    print(file=sys.stderr)


def _report(err: UntreeError) -> None:
    if isinstance(err, PathError):
        action = err.action.describe(_bold(str(err.filename)))
        _print_error(
            f"An error occurred while attempting to {action}.", err.cause
        )
    elif isinstance(err, StdinError):
        _print_error(
            "An error occurred while attempting to read from standard input.",
            err.cause,
        )
    elif isinstance(err, MissingContextError):
        _print_error("An error occurred with unknown context.", err.cause)
    else:
        _print_error("An error occurred.", err.cause)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="untree",
        description=(
            "A program to instantiate directory trees from the output of tree"
        ),
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=None,
        help=(
            "Directory to use as the root of the newly generated directory "
            "structure. Uses current working directory if no directory is "
            "specified."
        ),
    )
    parser.add_argument(
        "tree_files",
        nargs="*",
        help=(
            "List of files containing trees to be read by untree. If no "
            "files are specified, then the tree is read from standard input."
        ),
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help=(
            "Print the names of files and directories without creating "
            "them. Implies verbose."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print out the names of files and directories that untree creates.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"untree {_VERSION}"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    options = UntreeOptions(dry_run=args.dry_run, verbose=args.verbose)
    try:
        run(args.dir, args.tree_files, options)
    except UntreeError as err:
        _report(err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())