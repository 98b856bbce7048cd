"""Actions performed on paths, used to give context to errors."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path


class PathAction(Enum):
    """What was happening to a path when an error occurred."""

    CREATE_FILE = "CreateFile"
    CREATE_DIRECTORY = "CreateDirectory"
    OPEN_FILE_FOR_READING = "OpenFileForReading"
    READ_FILE = "ReadFile"

    def on(self, path: str | PathLike[str]) -> tuple[Path, PathAction]:
        """Pair this action with a path, forming an error context."""
        return (Path(path), self)

    def describe(self, path: object) -> str:
        """Describe the action as it applies to the given path."""
        templates = {
            PathAction.CREATE_FILE: "create file '{}'",
            PathAction.CREATE_DIRECTORY: "create directory '{}'",
            PathAction.OPEN_FILE_FOR_READING: "open '{}' for reading",
            PathAction.READ_FILE: "read file '{}'",
        }
        return templates[self].format(path)