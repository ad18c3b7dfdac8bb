import logging
import textwrap

import pytest

from steep.errors import DefinitionError
from steep.testing.discovery import collect


def write(path, source: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source), encoding="utf-8")
    return path


def names(units):
    return [unit.__name__ for unit in units]


def test_collects_functions_and_classes_in_source_order(tmp_path):
    write(
        tmp_path / "steep_cart.py",
        """
        def steep_second_by_name(t):
            pass


        class SteepFirstByName:
            def __init__(self, t):
                pass


        def helper(t):
            pass


        class NotAUnit:
            pass
        """,
    )

    assert names(collect(tmp_path)) == ["steep_second_by_name", "SteepFirstByName"]


def test_ignores_imported_names(tmp_path):
    write(
        tmp_path / "steep_imports.py",
        """
        from os.path import join as steep_join

        def steep_local(t):
            pass
        """,
    )

    assert names(collect(tmp_path)) == ["steep_local"]


def test_walks_directories_in_sorted_file_order(tmp_path):
    write(tmp_path / "b" / "steep_b.py", "def steep_b(t):\n    pass\n")
    write(tmp_path / "a" / "steep_a.py", "def steep_a(t):\n    pass\n")
    write(tmp_path / "a" / "other.py", "def steep_ignored(t):\n    pass\n")

    assert names(collect(str(tmp_path))) == ["steep_a", "steep_b"]


def test_single_file_path(tmp_path):
    path = write(tmp_path / "steep_one.py", "def steep_one(t):\n    pass\n")
    assert names(collect(path)) == ["steep_one"]


def test_non_definition_file_yields_nothing(tmp_path):
    path = write(tmp_path / "helpers.py", "def steep_one(t):\n    pass\n")
    assert collect(path) == []


def test_missing_path_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="steep.testing.discovery"):
        assert collect(tmp_path / "nowhere") == []
    assert "does not exist" in caplog.text


def test_import_failure_is_a_definition_error(tmp_path):
    write(tmp_path / "steep_broken.py", "raise RuntimeError('boom')\n")

    with pytest.raises(DefinitionError, match="Failed to import") as excinfo:
        collect(tmp_path)
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_collected_units_define_trees(tmp_path, runner):
    write(
        tmp_path / "steep_math.py",
        """
        def steep_math(t):
            with t.describe("math"):
                t.it("adds", lambda: None)
        """,
    )

    tree = runner.define_tests(collect(tmp_path))
    assert [scope.name for scope in tree.scopes] == ["math"]
    assert [test.name for test in tree.scopes[0].tests] == ["adds"]
