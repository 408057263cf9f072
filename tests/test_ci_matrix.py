"""
tests.test_ci_matrix

CI build matrix generation.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kba_plugin.ci import matrix as ci_matrix
from kba_plugin.ci.matrix import (
    BuildMatrix,
    build_matrix,
    generate_matrix,
    list_directories,
    render_matrix,
    run,
)
from kba_plugin.settings import Settings

PHP_VERSIONS = ["8.2", "8.3"]


def _make_dirs(base: Path, *names: str) -> None:
    for name in names:
        (base / name).mkdir(parents=True)


def test_plugins_only(tmp_path: Path) -> None:
    _make_dirs(tmp_path / "custom" / "plugins", "A", "B")

    matrix = generate_matrix(PHP_VERSIONS, tmp_path / "custom/plugins", tmp_path / "custom/apps")

    assert render_matrix(matrix) == '{"php_version":["8.2","8.3"],"plugin":["A","B"]}'


def test_no_plugins_or_apps(tmp_path: Path) -> None:
    (tmp_path / "custom" / "plugins").mkdir(parents=True)

    matrix = generate_matrix(PHP_VERSIONS, tmp_path / "custom/plugins", tmp_path / "custom/apps")

    assert render_matrix(matrix) == '{"php_version":["8.2","8.3"]}'


def test_plugins_and_apps(tmp_path: Path) -> None:
    _make_dirs(tmp_path / "custom" / "plugins", "FMJStudiosTestPlugin", "Another")
    _make_dirs(tmp_path / "custom" / "apps", "ShopApp")

    matrix = generate_matrix(PHP_VERSIONS, tmp_path / "custom/plugins", tmp_path / "custom/apps")

    assert json.loads(render_matrix(matrix)) == {
        "php_version": ["8.2", "8.3"],
        "plugin": ["Another", "FMJStudiosTestPlugin"],
        "app": ["ShopApp"],
    }


def test_list_directories_skips_files_and_hidden_entries(tmp_path: Path) -> None:
    _make_dirs(tmp_path, "b", "a", ".git")
    (tmp_path / "README.md").write_text("not a plugin")

    assert list_directories(tmp_path) == ["a", "b"]
    assert list_directories(tmp_path / "missing") == []


def test_build_matrix_is_pure() -> None:
    plugins = ["A"]
    matrix = build_matrix(PHP_VERSIONS, plugins, [])
    plugins.append("B")

    assert matrix == BuildMatrix(php_version=["8.2", "8.3"], plugin=["A"])
    assert matrix.app is None


def test_run_prints_matrix_from_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _make_dirs(tmp_path / "custom" / "apps", "ShopApp")

    assert run(Settings(ci_php_versions=["8.3"]), tmp_path) == 0

    out, err = capsys.readouterr()
    assert out == '{"php_version":["8.3"],"app":["ShopApp"]}'
    assert err == ""


def test_run_reports_serialisation_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken(_: BuildMatrix) -> str:
        raise ValueError("Malformed UTF-8 characters")

    monkeypatch.setattr(ci_matrix, "render_matrix", broken)
    project = tmp_path / "shop"
    project.mkdir()

    assert run(Settings(), project) == 0

    out, err = capsys.readouterr()
    assert out == ""
    assert err == (
        "Could not generate matrix for project: shop.\nERROR: Malformed UTF-8 characters\n"
    )


def test_find_repository_root_falls_back_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def no_git(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(ci_matrix.subprocess, "run", no_git)
    monkeypatch.chdir(tmp_path)

    assert ci_matrix.find_repository_root() == tmp_path
