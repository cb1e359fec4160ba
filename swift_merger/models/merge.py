"""Data models describing a merge run."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class EntryPointCandidate(BaseModel):
    """A file that could hold the program's starting point, with its score."""

    relative_path: str = Field(..., description="Path relative to the scanned directory")
    score: int = Field(..., description="Heuristic score, higher is cleaner")


class DiscoveryResult(BaseModel):
    """Partition of the discovered Swift files."""

    regular_files: List[str] = Field(default_factory=list, description="Files merged in sorted order")
    entry_point: Optional[str] = Field(None, description="File emitted last as the entry point")

    @property
    def total_files(self) -> int:
        return len(self.regular_files) + (1 if self.entry_point else 0)

    def is_empty(self) -> bool:
        return not self.regular_files and self.entry_point is None


class ProcessedFile(BaseModel):
    """A file body with its import lines removed."""

    relative_path: str
    content: str


class MergeResult(BaseModel):
    """Outcome of a merge, returned to library callers and the CLI."""

    output_path: Path
    regular_files: List[str] = Field(default_factory=list)
    entry_point: Optional[str] = None
    imports: List[str] = Field(default_factory=list, description="Sorted, de-duplicated import lines")
    content: str = Field("", description="Exact text written to output_path")

    @property
    def total_files(self) -> int:
        """Number of source files that ended up in the output."""
        return len(self.regular_files) + (1 if self.entry_point else 0)
