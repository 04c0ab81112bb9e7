"""Exception hierarchy shared by the CLI and the HTTP layer."""

from pathlib import Path


class CookError(Exception):
    """Base exception for all cooklist failures."""

    exit_code: int = 1

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigUnreadable(CookError):
    """Raised when an aisle or inflection file exists but cannot be read."""

    exit_code = 3

    def __init__(self, path: Path | str, reason: str = "unable to read config file"):
        super().__init__(reason, path)


class ConfigUnparsable(CookError):
    """Raised when a config file was read but its contents make no sense.

    The config loader recovers from this locally and carries on without a
    config, so it never reaches the caller.
    """

    exit_code = 3

    def __init__(self, path: Path | str, cause: Exception | None = None):
        reason = "unable to parse config file"
        if cause is not None:
            reason = f"{reason} ({cause})"
        super().__init__(reason, path)
        self.cause = cause


class FileListingFailed(CookError):
    """Raised when a recipe directory cannot be enumerated."""

    exit_code = 4

    def __init__(self, path: Path | str, reason: str = "unable to list directory"):
        super().__init__(reason, path)


class RecipeUnreadable(CookError):
    """Raised when a recipe file cannot be read as UTF-8 text."""

    exit_code = 5

    def __init__(self, path: Path | str, reason: str = "unable to read recipe"):
        super().__init__(reason, path)


class RecipeUnparsable(CookError):
    """Raised when the recipe parser rejects a file."""

    exit_code = 5

    def __init__(self, path: Path | str, cause: Exception):
        super().__init__(f"unable to parse recipe ({cause})", path)
        self.cause = cause


class OutputEncodingFailed(CookError):
    """Raised when a rendered document cannot be encoded for output."""

    exit_code = 6

    def __init__(self, reason: str = "unable to encode output"):
        super().__init__(reason)


class OutputWriteFailed(CookError):
    """Raised when rendered output cannot be written to its file."""

    exit_code = 7

    def __init__(self, path: Path | str, reason: str = "unable to write output"):
        super().__init__(reason, path)
