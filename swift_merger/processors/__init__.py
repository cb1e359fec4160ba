"""Text transforms applied to Swift sources before they are merged."""

from .assembler import assemble_merged_content, boundary_comment
from .entry_point import clean_entry_point, is_problematic_top_level_expression, is_simple_literal
from .imports import extract_imports

__all__ = [
    "assemble_merged_content",
    "boundary_comment",
    "clean_entry_point",
    "extract_imports",
    "is_problematic_top_level_expression",
    "is_simple_literal",
]
