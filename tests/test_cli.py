"""Tests for the frontreg command line."""

import json
import logging
from pathlib import Path

import rjsmin
from click.testing import CliRunner

from conftest import JQUERY_MIN, JQUERY_SOURCE
from frontreg.cli import main


def _run(*args):
    return CliRunner().invoke(main, list(args), env={"FRONTREG_SEARCH_ROOTS": ""})


def test_dir(modules_dir):
    result = _run("dir", "jquery", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert result.output.strip() == str(modules_dir / "jquery")


def test_dir_not_installed(modules_dir):
    result = _run("dir", "nope", "-r", str(modules_dir))
    assert result.exit_code == 1


def test_manifest(modules_dir):
    result = _run("manifest", "jquery", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert json.loads(result.output)["main"] == "dist/jquery.js"


def test_path(modules_dir):
    result = _run("path", "jquery", "-v", "3", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert result.output.strip() == str(modules_dir / "jquery" / "dist" / "jquery.js")


def test_path_minified(modules_dir):
    result = _run("path", "jquery", "-m", "/dist/jquery.min.js", "--minified", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert result.output.strip() == str(modules_dir / "jquery" / "dist" / "jquery.min.js")


def test_path_version_mismatch(modules_dir):
    result = _run("path", "jquery", "-v", "99.0.0", "-r", str(modules_dir))
    assert result.exit_code == 1


def test_get(modules_dir):
    result = _run("get", "jquery", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert result.output == JQUERY_SOURCE


def test_get_minified_shipped(modules_dir):
    result = _run("get", "jquery", "--minified", "-m", "dist/jquery.min.js", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert result.output == JQUERY_MIN


def test_get_minified_to_file(modules_dir, tmp_path):
    out = tmp_path / "jquery.min.js"
    result = _run("get", "jquery", "--minified", "-o", str(out), "-r", str(modules_dir))
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == rjsmin.jsmin(JQUERY_SOURCE)


def test_get_no_main(modules_dir):
    result = _run("get", "socket.io-stream", "-r", str(modules_dir))
    assert result.exit_code == 1


def test_bad_config_is_usage_error(tmp_path):
    result = _run("get", "jquery", "-c", str(tmp_path / "missing.yaml"))
    assert result.exit_code == 2


def test_roots(modules_dir):
    result = _run("roots", "-r", str(modules_dir))
    assert result.exit_code == 0
    assert "cli" in result.output


def test_verbose_flag(modules_dir):
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        result = _run("--verbose", "path", "jquery", "-r", str(modules_dir))
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
    assert result.exit_code == 0


def test_path_absolute_for_relative_root(modules_dir, monkeypatch):
    monkeypatch.chdir(modules_dir.parent)
    result = _run("path", "jquery", "-r", "node_modules")
    assert result.exit_code == 0
    assert Path(result.output.strip()).is_absolute()


def test_empty_name_is_usage_error(modules_dir):
    result = _run("get", "", "-r", str(modules_dir))
    assert result.exit_code == 2
