"""Data models for Swift File Merger."""

from .merge import DiscoveryResult, EntryPointCandidate, MergeResult, ProcessedFile

__all__ = [
    "DiscoveryResult",
    "EntryPointCandidate",
    "MergeResult",
    "ProcessedFile",
]
