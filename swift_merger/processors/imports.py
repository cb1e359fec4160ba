"""Import extraction for Swift sources."""

from typing import List, Set, Tuple

from ..core.defaults import IMPORT_KEYWORD


def is_import_line(line: str) -> bool:
    """Check whether a line is an ``import`` declaration."""
    return line.strip().startswith(IMPORT_KEYWORD)


def strip_leading_blank_lines(lines: List[str]) -> List[str]:
    """Drop blank lines from the start of ``lines``."""
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    return lines[start:]


def extract_imports(content: str) -> Tuple[Set[str], str]:
    """
    Split a Swift file into its import lines and the remaining body.

    Import lines are keyed by their trimmed text, so ``import Foo`` and
    ``  import Foo`` collapse into one entry while ``import  Foo`` stays
    distinct. All other lines keep their original order and indentation.

    Args:
        content: Raw file text

    Returns:
        Tuple of (set of trimmed import lines, body without imports and
        without leading blank lines)
    """
    imports: Set[str] = set()
    body: List[str] = []

    for line in content.splitlines():
        if is_import_line(line):
            imports.add(line.strip())
        else:
            body.append(line)

    return imports, "\n".join(strip_leading_blank_lines(body))
