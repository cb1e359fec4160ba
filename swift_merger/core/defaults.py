"""Swift source conventions and default output locations."""

SOURCE_SUFFIX = ".swift"
ENTRY_FILE_NAME = "main.swift"
ENTRY_MARKER = "@main"
IMPORT_KEYWORD = "import "
MAIN_FUNCTION_SIGNATURE = "func main("

DEFAULT_OUTPUT_DIRECTORY = "./build"
DEFAULT_OUTPUT_FILENAME = "merged.swift"

BOUNDARY_TEMPLATE = "// === File: {path} ==="

# Generated when an entry point has top-level statements that need relocating
WRAPPER_HEADER = "@main\nstruct AppMain {\n    static func main() {"
WRAPPER_FOOTER = "    }\n}"
WRAPPER_BODY_INDENT = " " * 8
