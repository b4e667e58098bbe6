"""Tests for fragments and version commands."""

from dockforge_cli.main import app


def test_fragments_lists_catalog(runner):
    """Test listing the whole catalog."""
    result = runner.invoke(app, ["fragments"])
    assert result.exit_code == 0
    assert "Fragment catalog" in result.output
    assert "dockerfile" in result.output
    assert "postgresql" in result.output


def test_fragments_by_category(runner):
    """Test filtering by category."""
    result = runner.invoke(app, ["fragments", "--category", "command"])
    assert result.exit_code == 0
    assert "streamlit" in result.output
    assert "builder" not in result.output


def test_fragments_unknown_category(runner):
    result = runner.invoke(app, ["fragments", "--category", "helm"])
    assert result.exit_code == 1
    assert "No fragments" in result.output


def test_fragments_show(runner):
    """Test printing one fragment's template text."""
    result = runner.invoke(app, ["fragments", "--show", "command/fastapi"])
    assert result.exit_code == 0
    assert "uvicorn" in result.output


def test_fragments_show_unknown(runner):
    result = runner.invoke(app, ["fragments", "--show", "service/oracle"])
    assert result.exit_code == 1
    assert "Unknown fragment" in result.output


def test_fragments_show_malformed_key(runner):
    result = runner.invoke(app, ["fragments", "--show", "postgresql"])
    assert result.exit_code == 1
    assert "category/variant" in result.output


def test_version_command(runner):
    """Test version command shows component versions."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
    assert "CLI" in result.output


def test_invalid_log_level_setting(runner, workdir, monkeypatch):
    """Test an unknown DOCKFORGE_LOG_LEVEL is reported before any command runs."""
    monkeypatch.setenv("DOCKFORGE_LOG_LEVEL", "verbose")
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 1
    assert "DOCKFORGE_LOG_LEVEL" in result.output
