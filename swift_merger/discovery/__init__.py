"""Discovery layer for Swift File Merger."""

from .file_discovery import FileDiscovery, resolve_target_path, score_entry_point

__all__ = [
    "FileDiscovery",
    "resolve_target_path",
    "score_entry_point",
]
