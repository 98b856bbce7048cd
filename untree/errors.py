"""Error types that carry context about where a failure happened."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

from .path_action import PathAction


class ReadStdinType(Enum):
    """Tag indicating that the context for an error was standard input."""

    READ_STDIN = "ReadStdin"


READ_STDIN = ReadStdinType.READ_STDIN

ContextInfo = Union[ReadStdinType, "tuple[str | PathLike[str], PathAction]"]


class UntreeError(Exception):
    """Base error, wrapping the underlying I/O failure."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause

    def more_context(self, info: ContextInfo) -> UntreeError:
        """Return an error with the given context filled in if it was missing."""
        return self

    def __str__(self) -> str:
        return str(self.cause)


class MissingContextError(UntreeError):
    """An I/O error whose origin was not known where it was raised."""

    def more_context(self, info: ContextInfo) -> UntreeError:
        if isinstance(info, ReadStdinType):
            return StdinError(self.cause)
        try:
            path, action = info
        except (TypeError, ValueError):
            raise TypeError(f"unsupported error context: {info!r}") from None
        if not isinstance(action, PathAction):
            raise TypeError(f"unsupported error context: {info!r}")
        return PathError(path, action, self.cause)

    def __str__(self) -> str:
        return f"An error occurred with unknown context: {self.cause}"


class StdinError(UntreeError):
    """An error raised while reading from standard input."""

    def __str__(self) -> str:
        return f"An error occurred while reading from standard input: {self.cause}"


class PathError(UntreeError):
    """An error raised while performing an action on a path."""

    def __init__(
        self,
        filename: str | PathLike[str],
        action: PathAction,
        cause: BaseException,
    ) -> None:
        super().__init__(cause)
        self.filename = Path(filename)
        self.action = action

    def __str__(self) -> str:
        return (
            f"An error occurred while attempting to "
            f"{self.action.describe(self.filename)}: {self.cause}"
        )