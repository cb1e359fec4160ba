"""Merge orchestration: discover, transform and write."""

import logging
import os
from typing import List, Optional, Set

from ..discovery import FileDiscovery, resolve_target_path
from ..models import MergeResult, ProcessedFile
from ..processors import assemble_merged_content, clean_entry_point, extract_imports
from .config import MergerConfig
from .exceptions import NoFilesFound, OutputWriteError


logger = logging.getLogger(__name__)


class FileMerger:
    """Merge every Swift file under a directory into one source file."""

    def __init__(self, config: MergerConfig, discovery: Optional[FileDiscovery] = None):
        """
        Initialize the merger.

        Args:
            config: Source and output locations for this run
            discovery: Discovery to use instead of one built from ``config``
        """
        self.config = config
        self.output_path = resolve_target_path(str(config.output_path))
        self.discovery = discovery or FileDiscovery(
            config.source_directory,
            exclude_patterns=config.exclude_patterns,
            output_path=self.output_path,
        )

    def merge_files(self) -> MergeResult:
        """
        Run the merge and write the output file.

        Returns:
            MergeResult describing what was written

        Raises:
            NoFilesFound: If there is nothing to merge
            MergerError: For missing directories, unreadable files or write failures
        """
        discovered = self.discovery.find_swift_files_with_entry_point()
        if discovered.is_empty():
            raise NoFilesFound(self.config.source_directory)

        self._create_output_directory()

        imports: Set[str] = set()
        processed_files: List[ProcessedFile] = []

        for relative_path in discovered.regular_files:
            file_imports, body = extract_imports(self.discovery.read_file_content(relative_path))
            imports |= file_imports
            processed_files.append(ProcessedFile(relative_path=relative_path, content=body))
            logger.debug("Processed %s (%d import(s))", relative_path, len(file_imports))

        entry_point: Optional[ProcessedFile] = None
        if discovered.entry_point is not None:
            file_imports, body = extract_imports(self.discovery.read_file_content(discovered.entry_point))
            imports |= file_imports
            entry_point = ProcessedFile(relative_path=discovered.entry_point, content=clean_entry_point(body))
            logger.debug("Processed entry point %s", discovered.entry_point)

        content = assemble_merged_content(imports, processed_files, entry_point)
        self._write_atomically(content)
        logger.info("Wrote %d file(s) to %s", discovered.total_files, self.output_path)

        return MergeResult(
            output_path=self.output_path,
            regular_files=discovered.regular_files,
            entry_point=discovered.entry_point,
            imports=sorted(imports),
            content=content,
        )

    def _create_output_directory(self) -> None:
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(self.output_path.parent, e.strerror or str(e)) from e

    def _write_atomically(self, content: str) -> None:
        """Write to a temp file beside the output, then move it into place."""
        tmp_path = self.output_path.with_name(self.output_path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_path, self.output_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise OutputWriteError(self.output_path, e.strerror or str(e)) from e
