"""Options and path kinds used when building trees."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class UntreeOptions:
    """Options for tree creation.

    ``verbose`` prints what is created; ``dry_run`` prints without creating
    anything and implies ``verbose``.
    """

    dry_run: bool = False
    verbose: bool = False

    def with_dry_run(self, dry_run: bool) -> UntreeOptions:
        """Return a copy with ``dry_run`` set to the given value."""
        return replace(self, dry_run=dry_run)

    def with_verbose(self, verbose: bool) -> UntreeOptions:
        """Return a copy with ``verbose`` set to the given value."""
        return replace(self, verbose=verbose)

    def is_dry_run(self) -> bool:
        """Whether nothing should actually be created."""
        return self.dry_run

    def is_verbose(self) -> bool:
        """Whether creation should be described on standard output."""
        return self.verbose or self.dry_run


class PathKind(Enum):
    """Whether a path should be created as a file or a directory."""

    FILE_PATH = "FilePath"
    DIRECTORY = "Directory"

    def __str__(self) -> str:
        return self.value