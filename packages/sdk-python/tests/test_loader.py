"""Tests for answers file loading."""

import pytest

from dockforge_common import InvalidSelection, SelectionFileError
from dockforge_sdk import load_selection, merge_answers, read_answers
from dockforge_sdk.loader import normalize_keys


class TestNormalizeKeys:
    def test_camel_case(self):
        assert normalize_keys({"projectName": "a", "backgroundWorker": "rq", "port": 1}) == {
            "project_name": "a",
            "background_worker": "rq",
            "port": 1,
        }

    def test_snake_case_unchanged(self):
        assert normalize_keys({"python_version": "3.12"}) == {"python_version": "3.12"}


class TestMergeAnswers:
    def test_overrides_win(self):
        merged = merge_answers({"framework": "flask", "port": 5000}, {"port": 8080})
        assert merged == {"framework": "flask", "port": 8080}

    def test_unset_overrides_are_ignored(self):
        merged = merge_answers(
            {"framework": "flask", "extraServices": ["nginx"]},
            {"framework": None, "extra_services": []},
        )
        assert merged == {"framework": "flask", "extra_services": ["nginx"]}


class TestReadAnswers:
    def test_reads_fixture(self, answers_file):
        data = read_answers(answers_file)
        assert data["projectName"] == "shop-api"
        assert data["extraServices"] == ["nginx"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SelectionFileError, match="not found") as exc_info:
            read_answers(tmp_path / "missing.yaml")
        assert exc_info.value.path.endswith("missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("framework: [unclosed\n")
        with pytest.raises(SelectionFileError, match="Invalid YAML"):
            read_answers(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- fastapi\n")
        with pytest.raises(SelectionFileError, match="must contain a mapping"):
            read_answers(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_answers(path) == {}


class TestLoadSelection:
    def test_load_fixture(self, answers_file):
        selection = load_selection(answers_file)
        assert selection.project_name == "shop-api"
        assert selection.framework == "django"
        assert selection.python_version == "3.11"
        assert selection.extra_services == frozenset({"nginx"})

    def test_overrides_take_precedence(self, answers_file):
        selection = load_selection(answers_file, overrides={"port": 9000, "cache": "memcached"})
        assert selection.port == 9000
        assert selection.cache == "memcached"

    def test_defaults_fill_gaps_only(self, answers_file):
        selection = load_selection(answers_file, defaults={"python_version": "3.10", "port": 1234})
        assert selection.python_version == "3.11"
        assert selection.port == 8080

    def test_overrides_only(self):
        selection = load_selection(overrides={"framework": "flask", "project_name": "shop"})
        assert selection.framework == "flask"

    def test_invalid_answers(self, tmp_path):
        path = tmp_path / "dockforge.yaml"
        path.write_text("framework: fastapi\nprojectName: ''\nport: 70000\n")
        with pytest.raises(InvalidSelection) as exc_info:
            load_selection(path)
        assert sorted(exc_info.value.fields) == ["port", "project_name"]
