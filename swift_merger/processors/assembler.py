"""Layout of the merged output file."""

from typing import Iterable, List, Optional

from ..core.defaults import BOUNDARY_TEMPLATE
from ..models import ProcessedFile


def boundary_comment(relative_path: str) -> str:
    """Marker line recording where a file's body came from."""
    return BOUNDARY_TEMPLATE.format(path=relative_path)


def format_imports_block(imports: Iterable[str]) -> str:
    """Sorted imports, one per line, followed by a blank line if any exist."""
    sorted_imports = sorted(imports)
    if not sorted_imports:
        return ""
    return "".join(f"{statement}\n" for statement in sorted_imports) + "\n"


def assemble_merged_content(
    imports: Iterable[str],
    regular_files: List[ProcessedFile],
    entry_point: Optional[ProcessedFile] = None,
) -> str:
    """
    Build the merged file text.

    Layout: the imports block, then each regular file as a boundary comment
    plus its trimmed body with a blank line between files, then the entry
    point last. Nothing follows the final body.
    """
    sections = [
        f"{boundary_comment(processed.relative_path)}\n{processed.content.strip()}"
        for processed in regular_files
    ]
    if entry_point is not None:
        sections.append(f"{boundary_comment(entry_point.relative_path)}\n{entry_point.content.strip()}")

    return format_imports_block(imports) + "\n\n".join(sections)
