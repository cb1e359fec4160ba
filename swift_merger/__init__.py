"""
Swift File Merger - merge a Swift project's sources into a single file.

Imports are consolidated at the top of the output and the entry point is
emitted last, with stray top-level statements wrapped in an ``@main`` type.
"""

from .core.config import MergerConfig
from .core.exceptions import (
    FileNotFound,
    MergerError,
    NoFilesFound,
    OutputWriteError,
    SourceDecodeError,
    TargetDirectoryNotFound,
)
from .core.merger import FileMerger
from .discovery import FileDiscovery
from .models import DiscoveryResult, MergeResult

__version__ = "1.0.0"
__author__ = "Swift File Merger Team"

__all__ = [
    "DiscoveryResult",
    "FileDiscovery",
    "FileMerger",
    "FileNotFound",
    "MergeResult",
    "MergerConfig",
    "MergerError",
    "NoFilesFound",
    "OutputWriteError",
    "SourceDecodeError",
    "TargetDirectoryNotFound",
]
