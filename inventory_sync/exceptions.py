from pathlib import Path


class InventorySyncError(Exception):
    """Base class for every error raised by the synchronizer."""


class ResourceError(InventorySyncError):
    """An inventory source does not exist or cannot be opened/read."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path


class MalformedRowError(InventorySyncError):
    """Raised in strict mode for a row the lenient loader would skip or coerce."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
