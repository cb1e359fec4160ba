"""Entry point cleanup.

Swift only allows executable top-level statements in ``main.swift``. Once the
entry point is merged into a single file alongside other sources, statements
such as ``print("hi")`` must move into an ``@main`` type. Classification is a
line-by-line heuristic over trimmed text, not a parser.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..core.defaults import (
    ENTRY_MARKER,
    IMPORT_KEYWORD,
    MAIN_FUNCTION_SIGNATURE,
    WRAPPER_BODY_INDENT,
    WRAPPER_FOOTER,
    WRAPPER_HEADER,
)


logger = logging.getLogger(__name__)

DECLARATION_PREFIXES = (
    IMPORT_KEYWORD,
    "@",
    "class ",
    "struct ",
    "enum ",
    "func ",
    "extension ",
    "protocol ",
    "typealias ",
    "//",
)

BINDING_PREFIXES = ("let ", "var ")

_BARE_MAIN_CALL = re.compile(r"main\(\s*\)\s*;?\s*(//.*)?")


def is_simple_literal(value: str) -> bool:
    """Check if an initializer is a string, number, bool, nil or bracketed literal."""
    trimmed = value.strip()
    if not trimmed:
        return False

    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in "\"'":
        return True

    try:
        float(trimmed)
        return True
    except ValueError:
        pass

    if trimmed in ("true", "false", "nil"):
        return True

    # Array/dictionary literals, contents unchecked
    return (trimmed.startswith("[") and trimmed.endswith("]")) or (
        trimmed.startswith("{") and trimmed.endswith("}")
    )


def _is_blank_or_brace(line: str) -> Optional[bool]:
    if line in ("", "{", "}"):
        return False
    return None


def _is_declaration(line: str) -> Optional[bool]:
    if line.startswith(DECLARATION_PREFIXES):
        return False
    return None


def _is_binding(line: str) -> Optional[bool]:
    if not line.startswith(BINDING_PREFIXES):
        return None
    if "=" not in line:
        return False
    initializer = line.split("=", 1)[1]
    return not is_simple_literal(initializer)


# Evaluated in order; the first rule returning a bool decides.
CLASSIFICATION_RULES: List[Callable[[str], Optional[bool]]] = [
    _is_blank_or_brace,
    _is_declaration,
    _is_binding,
]


def is_problematic_top_level_expression(line: str) -> bool:
    """
    Check whether a line cannot stay at the top level of a merged file.

    Declarations, attributes, comments, braces, blank lines and ``let``/``var``
    bindings without an initializer or with a simple literal initializer are
    safe. Everything else (calls, expressions, computed initializers) is
    problematic.
    """
    trimmed = line.strip()
    for rule in CLASSIFICATION_RULES:
        verdict = rule(trimmed)
        if verdict is not None:
            return verdict
    return True


def is_bare_main_call(line: str) -> bool:
    """True for a line that only calls ``main()``."""
    return _BARE_MAIN_CALL.fullmatch(line.strip()) is not None


def has_entry_construct(content: str) -> bool:
    """True if the content already declares ``@main`` or a ``main`` function."""
    stripped = content.strip()
    return ENTRY_MARKER in stripped or MAIN_FUNCTION_SIGNATURE in stripped


def partition_top_level_lines(content: str) -> Tuple[List[str], List[str]]:
    """Split lines into (safe, problematic), both in original order."""
    safe: List[str] = []
    problematic: List[str] = []
    for line in content.splitlines():
        if is_problematic_top_level_expression(line):
            problematic.append(line)
        else:
            safe.append(line)
    return safe, problematic


def build_wrapper(problematic: List[str]) -> str:
    """Generate the ``@main`` type whose ``main()`` runs the given lines."""
    body = [f"{WRAPPER_BODY_INDENT}{line}\n" for line in problematic if not is_bare_main_call(line)]
    return f"{WRAPPER_HEADER}\n{''.join(body)}{WRAPPER_FOOTER}"


def clean_entry_point(content: str) -> str:
    """
    Move problematic top-level statements of an entry point into ``@main``.

    Content that already has an entry construct, or has nothing problematic,
    is returned unchanged. Otherwise safe lines stay in place as a preamble and
    problematic lines are re-indented into a generated ``AppMain.main()``.
    Bare ``main()`` calls are dropped so the wrapper does not call itself.
    """
    if has_entry_construct(content):
        return content

    safe, problematic = partition_top_level_lines(content)
    if not problematic:
        return content

    logger.debug("Wrapping %d top-level statement(s) in %s", len(problematic), ENTRY_MARKER)

    preamble = "\n".join(safe).strip()
    wrapper = build_wrapper(problematic)
    if preamble:
        return f"{preamble}\n\n{wrapper}"
    return wrapper
