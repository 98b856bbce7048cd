"""Create directory trees from the textual output of tree."""

__version__ = "0.9.10"
__all__ = ["cli", "errors", "functions", "path_action", "types"]