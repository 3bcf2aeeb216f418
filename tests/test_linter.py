import json

import pytest

from option_grammar.config import GrammarConfig, grammar_config
from option_grammar.linter import lint_files
from option_grammar.linter.run_lint import find_catalog_files, main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(grammar_config, "set_logging", lambda: None)


def _messages(entries):
    return [e["message"] for e in entries]


def test_clean_catalog(write_catalog, ec2_catalog_text):
    (result,) = lint_files([write_catalog(ec2_catalog_text)])
    assert result.errors == []
    assert result.warnings == []
    assert not result.has_errors


def test_wrong_extension(write_catalog, ec2_catalog_text):
    (result,) = lint_files([write_catalog(ec2_catalog_text, name="ec2.yaml")])
    assert any("catalog extension" in m for m in _messages(result.errors))


def test_file_name_not_snake_case(write_catalog, ec2_catalog_text):
    text = ec2_catalog_text.replace("name: ec2", "name: SimpleDB")
    (result,) = lint_files([write_catalog(text, name="SimpleDB.catalog.yaml")])
    assert result.errors == []
    assert any("should be in snake_case format" in m for m in _messages(result.warnings))


def test_catalog_name_mismatch(write_catalog, ec2_catalog_text):
    (result,) = lint_files([write_catalog(ec2_catalog_text, name="rds.catalog.yaml")])
    (warning,) = result.warnings
    assert warning["message"].startswith("Catalog name 'ec2' does not match file name 'rds'")
    assert warning["line"] == 2


def test_structure_errors_have_locations(write_catalog):
    path = write_catalog("name: ec2\noperations:\n  Describe: 3\n")
    (result,) = lint_files([path])
    (error,) = result.errors
    assert error["yaml_path"] == "/operations/Describe"
    assert error["line"] == 3
    assert any("Missing 'option_grammar_format'" in m for m in _messages(result.warnings))


def test_incompatible_version(write_catalog):
    (result,) = lint_files([write_catalog("option_grammar_format: 3.0.0\nname: ec2\noperations: {}\n")])
    assert any("Incompatible format version" in m for m in _messages(result.errors))


def test_bad_descriptor(write_catalog):
    path = write_catalog("name: ec2\noperations:\n  Describe:\n    - MaxResults: [integer, unique]\n")
    (result,) = lint_files([path])
    assert any("Unknown descriptor 'unique'" in m for m in _messages(result.errors))


def test_unreadable_yaml(write_catalog):
    (result,) = lint_files([write_catalog("name: [ec2\n")])
    assert _messages(result.errors)[0].startswith("Failed to load YAML file")


class TestNaming:
    def test_binding_name_collision(self, write_catalog):
        path = write_catalog(
            "option_grammar_format: 1.0.0\n"
            "name: ec2\n"
            "operations:\n"
            "  Describe:\n"
            "    - MaxResults: [integer]\n"
            "    - Limit: [{rename: max_results}]\n"
        )
        (result,) = lint_files([path])
        (error,) = result.errors
        assert error["message"].startswith(
            "Options 'MaxResults' and 'Limit' of operation Describe share the binding name 'max_results'"
        )

    def test_collision_inside_nested_structure(self, write_catalog):
        path = write_catalog(
            "option_grammar_format: 1.0.0\n"
            "name: ec2\n"
            "operations:\n"
            "  Describe:\n"
            "    - Filter:\n"
            "        - membered_list:\n"
            "            - structure:\n"
            "                Name: [string]\n"
            "                Key: [{rename: name}]\n"
        )
        (result,) = lint_files([path])
        assert any("of structure Filter of operation Describe" in m for m in _messages(result.errors))

    def test_case_warnings(self, write_catalog):
        path = write_catalog(
            "option_grammar_format: 1.0.0\n"
            "name: ec2\n"
            "operations:\n"
            "  describe_things:\n"
            "    - max_results: [integer]\n"
        )
        (result,) = lint_files([path])
        warnings = _messages(result.warnings)
        assert result.errors == []
        assert any("Operation name 'describe_things' should be in PascalCase" in m for m in warnings)
        assert any("Option name 'max_results' of operation describe_things" in m for m in warnings)


class TestCli:
    def test_find_catalog_files(self, write_catalog, ec2_catalog_text, tmp_path):
        path = write_catalog(ec2_catalog_text)
        (tmp_path / "notes.yaml").write_text("a: 1\n", encoding="utf-8")
        assert find_catalog_files([str(tmp_path)]) == [path]
        assert find_catalog_files([str(tmp_path / "missing")]) == []

    def test_success(self, write_catalog, ec2_catalog_text, capsys):
        path = write_catalog(ec2_catalog_text)
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 0
        assert "Lint succeeded with no errors." in capsys.readouterr().out

    def test_json_output(self, write_catalog, capsys):
        path = write_catalog("name: ec2\noperations:\n  Describe:\n    - MaxResults: [integr]\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "json", str(path)])
        assert exc_info.value.code == 1
        output = json.loads(capsys.readouterr().out)
        assert output["files"] == 1
        assert output["errors"] == 1
        assert output["results"][0]["file"] == str(path)

    def test_github_actions_output(self, write_catalog, capsys):
        path = write_catalog("name: ec2\noperations:\n  Describe: 3\n")
        with pytest.raises(SystemExit):
            main(["--format", "github-actions", str(path)])
        out = capsys.readouterr().out
        assert f"::error file={path},line=3::" in out

    def test_no_files(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path)])
        assert exc_info.value.code == 1


class TestConfig:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPTION_GRAMMAR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("OPTION_GRAMMAR_CACHE_ENABLED", "false")
        monkeypatch.delenv("OPTION_GRAMMAR_PRINT_LEVEL", raising=False)
        config = GrammarConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.print_level == "ERROR"
        assert config.cache_enabled is False

    def test_set_logging(self):
        logger = GrammarConfig(log_level="WARNING").set_logging()
        try:
            assert logger.name == "option_grammar"
            assert logger.level == 30
            assert not logger.propagate
        finally:
            logger.handlers.clear()
            logger.propagate = True
            logger.setLevel(0)


def test_file_that_is_not_utf8(tmp_path, write_catalog, ec2_catalog_text):
    bad = tmp_path / "s3.catalog.yaml"
    bad.write_bytes(b"name: s3\noperations:\n  ListBuckets:\n    - Prefix\xff\n")
    good = write_catalog(ec2_catalog_text)

    bad_result, good_result = lint_files([bad, good])
    (error,) = bad_result.errors
    assert error["message"].startswith("Failed to load YAML file: Failed to read catalog file")
    assert good_result.errors == []


def test_newer_minor_version_is_a_warning(write_catalog, ec2_catalog_text):
    text = ec2_catalog_text.replace("option_grammar_format: 1.0.0", "option_grammar_format: 1.2.0")
    (result,) = lint_files([write_catalog(text)])
    assert result.errors == []
    (warning,) = result.warnings
    assert "newer minor version" in warning["message"]
    assert warning["line"] == 1
