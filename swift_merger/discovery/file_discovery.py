"""Swift file discovery and entry point selection."""

import fnmatch
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.defaults import (
    DEFAULT_OUTPUT_FILENAME,
    ENTRY_FILE_NAME,
    ENTRY_MARKER,
    SOURCE_SUFFIX,
)
from ..core.exceptions import FileNotFound, MergerError, SourceDecodeError, TargetDirectoryNotFound
from ..models import DiscoveryResult, EntryPointCandidate


logger = logging.getLogger(__name__)

# Line starts that do not count as top-level expressions when scoring
SCORING_SAFE_PREFIXES = (
    "//",
    "import",
    "@",
    "class",
    "struct",
    "enum",
    "protocol",
    "extension",
    "typealias",
    "func",
    "var",
    "let",
    "{",
    "}",
)


def resolve_target_path(raw_path: str) -> Path:
    """
    Turn a user-supplied directory into an absolute path.

    ``~`` and ``~/...`` expand to the home directory; other relative paths
    are anchored at the current working directory. Existence is not checked.
    """
    if raw_path == "~":
        return Path.home()
    if raw_path.startswith("~/"):
        return Path.home() / raw_path[2:]

    path = Path(raw_path)
    if path.is_absolute():
        return path
    return Path.cwd() / path


def score_entry_point(content: str, relative_path: str) -> int:
    """
    Score how safe a candidate is to use as the entry point.

    ``@main`` files, short files and files at the root of the scanned tree
    score higher; each line that looks like a top-level expression costs 2.
    """
    score = 0
    lines = content.splitlines()

    if ENTRY_MARKER in content:
        score += 20

    if len(lines) < 20:
        score += 10
    elif len(lines) < 50:
        score += 5

    expressions = [
        line for line in (raw.strip() for raw in lines)
        if line and not line.startswith(SCORING_SAFE_PREFIXES)
    ]
    score -= len(expressions) * 2

    if "/" not in relative_path:
        score += 5

    return score


class FileDiscovery:
    """Find Swift files under a directory and pick the entry point."""

    def __init__(
        self,
        target_directory: str,
        exclude_patterns: Optional[Iterable[str]] = None,
        output_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize file discovery.

        Args:
            target_directory: Directory to scan, as typed by the user
            exclude_patterns: Globs over relative POSIX paths to skip
            output_path: Merged file location, never treated as a source
        """
        self.target_directory = target_directory
        self.target_path = resolve_target_path(target_directory)
        self.exclude_patterns = list(exclude_patterns or [])
        self.output_path = resolve_target_path(str(output_path)).resolve() if output_path else None

    def find_swift_files_with_entry_point(self) -> DiscoveryResult:
        """Partition the tree into regular files and at most one entry point."""
        all_files = self.find_all_files()
        entry_point = self.find_best_entry_point(all_files)
        regular_files = [
            relative_path for relative_path in all_files
            if self.should_include_as_regular_file(relative_path, entry_point)
        ]
        return DiscoveryResult(regular_files=regular_files, entry_point=entry_point)

    def find_all_files(self) -> List[str]:
        """
        List Swift files under the target directory.

        Returns:
            Relative POSIX paths, sorted lexicographically

        Raises:
            TargetDirectoryNotFound: If the resolved directory does not exist
        """
        if not self.target_path.exists():
            raise TargetDirectoryNotFound(self.target_directory)

        files = []
        for file_path in self.target_path.rglob(f"*{SOURCE_SUFFIX}"):
            if not file_path.is_file() or self._is_excluded(file_path):
                continue
            files.append(file_path.relative_to(self.target_path).as_posix())

        logger.debug("Found %d Swift file(s) under %s", len(files), self.target_path)
        return sorted(files)

    def _is_excluded(self, file_path: Path) -> bool:
        if file_path.name == DEFAULT_OUTPUT_FILENAME:
            return True
        if self.output_path is not None and file_path.resolve() == self.output_path:
            return True
        relative_path = file_path.relative_to(self.target_path).as_posix()
        return any(fnmatch.fnmatch(relative_path, pattern) for pattern in self.exclude_patterns)

    def find_best_entry_point(self, files: List[str]) -> Optional[str]:
        """
        Pick the highest-scoring entry point candidate.

        Candidates are files named ``main.swift`` or containing ``@main``.
        On a tie the candidate earliest in ``files`` order wins.
        """
        best: Optional[EntryPointCandidate] = None

        for relative_path in files:
            content = self.read_file_content(relative_path)
            if Path(relative_path).name != ENTRY_FILE_NAME and ENTRY_MARKER not in content:
                continue

            candidate = EntryPointCandidate(
                relative_path=relative_path,
                score=score_entry_point(content, relative_path),
            )
            logger.debug("Entry point candidate %s scored %d", candidate.relative_path, candidate.score)
            if best is None or candidate.score > best.score:
                best = candidate

        return best.relative_path if best else None

    def should_include_as_regular_file(self, relative_path: str, entry_point: Optional[str]) -> bool:
        """
        Decide whether a file is merged as a plain source.

        ``main.swift`` files and files containing ``@main`` never are, whether
        or not they won entry point selection. A file that cannot be read is
        included so the read error surfaces during merging.
        """
        file_name = Path(relative_path).name

        if file_name == DEFAULT_OUTPUT_FILENAME:
            return False
        if entry_point is not None and relative_path == entry_point:
            return False
        if file_name == ENTRY_FILE_NAME:
            return False

        try:
            content = self.read_file_content(relative_path)
        except MergerError:
            return True

        return ENTRY_MARKER not in content

    def read_file_content(self, relative_path: str) -> str:
        """
        Read a discovered file as UTF-8 text.

        Raises:
            FileNotFound: If the file no longer exists or cannot be opened
            SourceDecodeError: If the bytes are not valid UTF-8
        """
        full_path = self.target_path / relative_path
        if not full_path.exists():
            raise FileNotFound(relative_path)

        try:
            return full_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceDecodeError(relative_path) from e
        except OSError as e:
            raise FileNotFound(relative_path) from e
