"""Command-line interface for Swift File Merger."""

import logging
from typing import Optional, Tuple

import click
import yaml  # type: ignore
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.config import MergerConfig
from .core.defaults import DEFAULT_OUTPUT_DIRECTORY, DEFAULT_OUTPUT_FILENAME
from .core.exceptions import FileNotFound, MergerError, TargetDirectoryNotFound
from .core.merger import FileMerger
from .models import MergeResult


class MergerCommand(click.Command):
    """Click command that exits with status 1 on usage errors."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            e.ctx = e.ctx or ctx
            raise


def print_merge_summary(console: Console, result: MergeResult) -> None:
    """List the merged files, entry point last."""
    console.print(f"📁 Merged {result.total_files} Swift files:")
    for relative_path in result.regular_files:
        console.print(f"   • {escape(relative_path)}")
    if result.entry_point:
        console.print(f"   • {escape(result.entry_point)} (entry point)", style="bold")


def print_error(console: Console, error: MergerError) -> None:
    """Print an error with hints for the kinds users can fix themselves."""
    console.print(f"Error: {escape(str(error))}", style="red")

    if isinstance(error, TargetDirectoryNotFound):
        console.print()
        console.print("Suggestions:")
        console.print(f"   • Check if the path exists: {escape(error.path)}")
        console.print("   • Use absolute path (e.g., /Users/username/project)")
        console.print("   • Use ~ for home directory (e.g., ~/project)")
        console.print("   • Ensure you have read permissions for the directory")
    elif isinstance(error, FileNotFound):
        console.print()
        console.print(f"The file {escape(error.path)} could not be read")


def load_config(config_path: Optional[str], **overrides) -> MergerConfig:
    """Build the run configuration; explicit CLI values win over the file."""
    if config_path:
        return MergerConfig.from_file(config_path, **overrides)
    return MergerConfig(**{key: value for key, value in overrides.items() if value is not None})


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@click.command(
    cls=MergerCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("source_directory")
@click.option(
    "--output", "-o",
    metavar="DIR",
    help=f"Output directory (default: {DEFAULT_OUTPUT_DIRECTORY})",
)
@click.option(
    "--filename", "-f",
    metavar="FILE",
    help=f"Output filename (default: {DEFAULT_OUTPUT_FILENAME})",
)
@click.option("--verbose", is_flag=True, help="Show detailed information")
@click.option(
    "--config", "-c",
    metavar="FILE",
    help="Path to a YAML or JSON configuration file",
)
@click.option(
    "--exclude", "-e",
    metavar="PATTERN",
    multiple=True,
    help="Skip Swift files whose relative path matches this glob (repeatable)",
)
@click.version_option(
    __version__, "-v", "--version",
    prog_name="SwiftFileMerger",
    message="%(prog)s %(version)s",
)
@click.pass_context
def main(ctx: click.Context,
         source_directory: str,
         output: Optional[str],
         filename: Optional[str],
         verbose: bool,
         config: Optional[str],
         exclude: Tuple[str, ...]):
    """
    SwiftFileMerger - Merge Swift source files into a single file.

    Recursively finds all Swift files in SOURCE_DIRECTORY, consolidates
    imports, and merges them into a single output file. Entry points (files
    with @main or main.swift) are handled specially.

    Examples:

    \b
      swift-merger ~/MyProject/Sources
      swift-merger /path/to/project --output ./dist
      swift-merger ./Sources -f combined.swift --verbose
    """
    console = Console(highlight=False, soft_wrap=True, emoji=False)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

    try:
        options = load_config(
            config,
            source_directory=source_directory,
            output_directory=output,
            output_filename=filename,
            exclude_patterns=list(exclude) or None,
            verbose=verbose or None,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"Error loading config file: {escape(str(e))}", style="red")
        ctx.exit(1)

    configure_logging(options.verbose)

    try:
        result = FileMerger(options).merge_files()
    except MergerError as e:
        print_error(err_console, e)
        ctx.exit(1)

    print_merge_summary(console, result)
    output_path = f"{options.output_directory}/{options.output_filename}"
    console.print(f"Swift files successfully merged into {escape(output_path)}", style="bold green")

    if options.verbose:
        console.print(f"Source directory: {escape(options.source_directory)}")
        console.print(f"Output directory: {escape(options.output_directory)}")
        console.print(f"Output file: {escape(options.output_filename)}")


if __name__ == "__main__":
    main()
