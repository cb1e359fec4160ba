"""Errors raised while discovering, reading and merging Swift sources."""

from pathlib import Path
from typing import Union


class MergerError(Exception):
    """Base class for every failure the merger reports to the user."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(message)


class TargetDirectoryNotFound(MergerError):
    """The source directory does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Target directory not found: {path}", path)


class FileNotFound(MergerError):
    """A discovered file is gone by the time it is read."""

    def __init__(self, relative_path: str) -> None:
        super().__init__(f"File not found: {relative_path}", relative_path)


class NoFilesFound(MergerError):
    """Discovery produced neither regular files nor an entry point."""

    def __init__(self, directory: Union[str, Path]) -> None:
        super().__init__(f"No Swift files found in {directory}", directory)


class SourceDecodeError(MergerError):
    """A source file is not valid UTF-8 text."""

    def __init__(self, relative_path: str) -> None:
        super().__init__(f"File is not valid UTF-8 text: {relative_path}", relative_path)


class OutputWriteError(MergerError):
    """The output directory or file could not be written."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        message = f"Could not write output to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path)
