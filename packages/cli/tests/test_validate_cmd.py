"""Tests for validate command."""

from dockforge_cli.main import app


def test_validate_valid_file(runner, answers_file):
    """Test validating a valid answers file."""
    result = runner.invoke(app, ["validate", str(answers_file)])
    assert result.exit_code == 0
    assert "is valid" in result.output
    assert "fastapi" in result.output


def test_validate_default_path(runner, answers_file):
    """Test validate falls back to dockforge.yaml."""
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 0


def test_validate_file_not_found(runner, workdir):
    """Test validating a non-existent file."""
    result = runner.invoke(app, ["validate", "nonexistent.yaml"])
    assert result.exit_code == 1
    assert "not found" in result.output.lower()


def test_validate_lists_every_problem(runner, invalid_answers_file):
    """Test all violations are reported in one run."""
    result = runner.invoke(app, ["validate", str(invalid_answers_file)])
    assert result.exit_code == 1
    assert "3 problem(s)" in result.output
    for field in ("project_name", "framework", "port"):
        assert field in result.output


def test_validate_with_verbose(runner, answers_file):
    """Test validate with the global verbose flag."""
    result = runner.invoke(app, ["--verbose", "validate", str(answers_file)])
    assert result.exit_code == 0


def test_validate_non_list_system_dependencies(runner, workdir):
    """Test a scalar system_dependencies value is reported, not raised."""
    path = workdir / "scalar.yaml"
    path.write_text("project_name: myapp\nframework: flask\nsystem_dependencies: 5\n")
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "system_dependencies" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
