"""Tests for the command-line entry point."""
import logging

import pytest

from taxatree import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TAXATREE_NO_SEED", raising=False)
    monkeypatch.delenv("TAXATREE_BROWSER", raising=False)


def test_show(capsys):
    assert cli.main(["show"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("(Class) Chondrichthyes\n")
    assert "(Species) carcharias [Great White Shark] {W}" in out


def test_show_without_seed(capsys):
    assert cli.main(["--no-seed", "show"]) == 0
    assert "The tree is currently empty." in capsys.readouterr().out


def test_search(capsys):
    assert cli.main(["search", "tiger shark"]) == 0
    assert "Taxonomic Name: cuvier" in capsys.readouterr().out


def test_search_not_found(capsys):
    assert cli.main(["search", "Lion"]) == 0
    assert capsys.readouterr().out == "'Lion' not found.\n"


def test_search_empty_name_fails():
    assert cli.main(["search", " "]) == 1


def test_traverse_level(capsys):
    assert cli.main(["traverse", "level"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [
        "(Class) Chondrichthyes",
        "(Order) Lamniformes",
        "(Order) Carcharhiniformes",
    ]
    assert len(lines) == 9


def test_species_table(capsys):
    assert cli.main(["species", "--rank", "class"]) == 0
    out = capsys.readouterr().out
    assert "carcharias" in out and "Tiger Shark" in out
    assert "species_count" in out


def test_species_bad_rank():
    assert cli.main(["species", "--rank", "kingdom"]) == 1


def test_menu_is_default(monkeypatch):
    ran = []
    monkeypatch.setattr(cli, "run_menu", lambda config, tree: ran.append(len(tree)))
    monkeypatch.setitem(cli.COMMANDS, "menu", cli.run_menu)
    assert cli.main([]) == 0
    assert ran == [9]


def test_unexpected_error_returns_one(monkeypatch):
    def boom(config, tree):
        raise RuntimeError("boom")

    monkeypatch.setitem(cli.COMMANDS, "show", boom)
    assert cli.main(["show"]) == 1


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert "v1.0.0" in capsys.readouterr().out


@pytest.fixture
def restore_log_level():
    package_logger = logging.getLogger("taxatree")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


def test_menu_logs_warnings_only(monkeypatch, restore_log_level):
    monkeypatch.setitem(cli.COMMANDS, "menu", lambda config, tree: None)
    assert cli.main(["menu"]) == 0
    assert restore_log_level.level == logging.WARNING


def test_other_commands_log_info(restore_log_level, capsys):
    assert cli.main(["show"]) == 0
    assert restore_log_level.level == logging.INFO


def test_verbose_menu_logs_debug(monkeypatch, restore_log_level):
    monkeypatch.setitem(cli.COMMANDS, "menu", lambda config, tree: None)
    assert cli.main(["--verbose"]) == 0
    assert restore_log_level.level == logging.DEBUG
