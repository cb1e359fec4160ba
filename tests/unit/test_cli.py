"""Unit tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from swift_merger import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path):
    source = tmp_path / "Sources"
    (source / "Models").mkdir(parents=True)
    (source / "Models" / "User.swift").write_text("import Foundation\nstruct User {}", encoding="utf-8")
    (source / "main.swift").write_text('import Foundation\nprint("hi")', encoding="utf-8")
    return source


@pytest.fixture
def no_merge(monkeypatch):
    """Fail the test if the command gets as far as merging."""
    class ExplodingMerger:
        def __init__(self, *args, **kwargs):
            raise AssertionError("merge must not run")

    monkeypatch.setattr(cli, "FileMerger", ExplodingMerger)


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help(runner, no_merge, flag):
    result = runner.invoke(cli.main, [flag])

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "--output" in result.output
    assert "--filename" in result.output


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_version(runner, no_merge, flag):
    result = runner.invoke(cli.main, [flag])

    assert result.exit_code == 0
    assert result.output.strip() == "SwiftFileMerger 1.0.0"


@pytest.mark.parametrize(
    "args",
    [
        ["--bogus", "Sources"],
        [],
        ["one", "two"],
        ["Sources", "--output"],
        ["Sources", "-f"],
    ],
)
def test_usage_errors_exit_1(runner, no_merge, args):
    result = runner.invoke(cli.main, args)

    assert result.exit_code == 1
    assert "Usage:" in result.output


def test_successful_merge(runner, project, tmp_path):
    output = tmp_path / "out"

    result = runner.invoke(cli.main, [str(project), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Merged 2 Swift files:" in result.output
    assert "• Models/User.swift" in result.output
    assert "• main.swift (entry point)" in result.output
    assert f"Swift files successfully merged into {output}/merged.swift" in result.output
    assert "Source directory:" not in result.output

    merged = (output / "merged.swift").read_text(encoding="utf-8")
    assert merged.startswith("import Foundation\n\n// === File: Models/User.swift ===\nstruct User {}\n\n")
    assert '        print("hi")\n' in merged


def test_verbose_and_filename(runner, project, tmp_path):
    output = tmp_path / "out"

    result = runner.invoke(cli.main, [str(project), "--output", str(output), "--filename", "All.swift", "--verbose"])

    assert result.exit_code == 0, result.output
    assert (output / "All.swift").is_file()
    assert f"Source directory: {project}" in result.output
    assert f"Output directory: {output}" in result.output
    assert "Output file: All.swift" in result.output


def test_exclude_option(runner, project, tmp_path):
    output = tmp_path / "out"

    result = runner.invoke(cli.main, [str(project), "-o", str(output), "-e", "Models/*"])

    assert result.exit_code == 0, result.output
    assert "Merged 1 Swift files:" in result.output
    assert "Models/User.swift" not in (output / "merged.swift").read_text(encoding="utf-8")


def test_config_file(runner, project, tmp_path):
    output = tmp_path / "from-config"
    config_file = tmp_path / "merger.yaml"
    config_file.write_text(f"output_directory: {output}\noutput_filename: Bundle.swift\n", encoding="utf-8")

    result = runner.invoke(cli.main, [str(project), "--config", str(config_file)])

    assert result.exit_code == 0, result.output
    assert (output / "Bundle.swift").is_file()


def test_bad_config_file(runner, project, tmp_path):
    result = runner.invoke(cli.main, [str(project), "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Error loading config file" in result.output


def test_missing_directory_prints_suggestions(runner, tmp_path):
    missing = tmp_path / "does-not-exist"

    result = runner.invoke(cli.main, [str(missing), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert f"Error: Target directory not found: {missing}" in result.output
    assert "Suggestions:" in result.output
    assert "Use ~ for home directory" in result.output
    assert "Ensure you have read permissions" in result.output


def test_no_swift_files(runner, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(cli.main, [str(empty), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert f"Error: No Swift files found in {empty}" in result.output


def test_unreadable_file_note(runner, project, tmp_path, monkeypatch):
    from swift_merger.core.exceptions import FileNotFound

    def vanish(self, relative_path):
        raise FileNotFound(relative_path)

    monkeypatch.setattr(cli.FileMerger, "merge_files", lambda self: vanish(self, "Models/User.swift"))

    result = runner.invoke(cli.main, [str(project), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Error: File not found: Models/User.swift" in result.output
    assert "The file Models/User.swift could not be read" in result.output


def test_relative_source_directory(runner, project, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli.main, ["Sources"])

    assert result.exit_code == 0, result.output
    assert Path(tmp_path / "build" / "merged.swift").is_file()
    assert "Swift files successfully merged into ./build/merged.swift" in result.output


@pytest.mark.parametrize("flag", ["--output", "-f"])
def test_missing_option_value_prints_usage(runner, no_merge, flag):
    result = runner.invoke(cli.main, ["Sources", flag])

    assert result.exit_code == 1
    assert "Usage:" in result.output
    assert f"Option '{flag}' requires an argument" in result.output


def test_non_mapping_config_file(runner, project, tmp_path):
    config_file = tmp_path / "merger.yaml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")

    result = runner.invoke(cli.main, [str(project), "-c", str(config_file)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error loading config file" in result.output
    assert "must contain a mapping" in result.output


def test_emoji_codes_in_paths_printed_verbatim(runner, tmp_path):
    source = tmp_path / "src"
    (source / "x:cd:y").mkdir(parents=True)
    (source / "x:cd:y" / "A.swift").write_text("struct A {}", encoding="utf-8")
    output = tmp_path / "out"

    result = runner.invoke(cli.main, [str(source), "-o", str(output), "-f", ":smile:.swift"])

    assert result.exit_code == 0, result.output
    assert "• x:cd:y/A.swift" in result.output
    assert f"merged into {output}/:smile:.swift" in result.output
    assert "💿" not in result.output


def test_emoji_codes_in_error_paths_printed_verbatim(runner, tmp_path):
    missing = tmp_path / "gone:cd:dir"

    result = runner.invoke(cli.main, [str(missing), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert f"Check if the path exists: {missing}" in result.output
    assert "💿" not in result.output
