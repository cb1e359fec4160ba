"""Core merge components."""

from .config import MergerConfig
from .exceptions import (
    FileNotFound,
    MergerError,
    NoFilesFound,
    OutputWriteError,
    SourceDecodeError,
    TargetDirectoryNotFound,
)
from .merger import FileMerger

__all__ = [
    "FileMerger",
    "FileNotFound",
    "MergerConfig",
    "MergerError",
    "NoFilesFound",
    "OutputWriteError",
    "SourceDecodeError",
    "TargetDirectoryNotFound",
]
