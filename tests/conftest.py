"""Shared fixtures: a small fake node_modules tree."""

import json
from pathlib import Path

import pytest

JQUERY_SOURCE = """\
/*!
 * jQuery JavaScript Library v3.4.1
 */
( function( global, factory ) {
    "use strict";

    // Expose a factory for module loaders
    var version = "3.4.1";
    function jQuery( selector ) {
        return new jQuery.fn.init( selector );
    }
    global.jQuery = global.$ = jQuery;
} )( window );
"""

# Shipped artifact; deliberately not what a minifier would produce
JQUERY_MIN = '/*! jQuery v3.4.1 | (c) JS Foundation */!function(e){e.jQuery=e.$=function(){}}(window);\n'

BOOTSTRAP_CSS = """\
/*!
 * Bootstrap v4.3.1
 */
.btn {
  display: inline-block;
  color: #212529;
}

.btn:hover {
  color: #212529;
  text-decoration: none;
}
"""

SOCKET_STREAM_SOURCE = "module.exports = function stream() {\n  return null;\n};\n"


def write_package(root: Path, name: str, manifest: dict | str | None, files: dict[str, str]) -> Path:
    """Write a fake installed package under ``root``."""
    lib_dir = root / name
    lib_dir.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        raw = manifest if isinstance(manifest, str) else json.dumps(manifest, indent=2)
        (lib_dir / "package.json").write_text(raw, encoding="utf-8")
    for rel, content in files.items():
        path = lib_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return lib_dir


@pytest.fixture
def modules_dir(tmp_path: Path) -> Path:
    root = tmp_path / "node_modules"
    write_package(
        root,
        "jquery",
        {"name": "jquery", "version": "3.4.1", "main": "dist/jquery.js"},
        {"dist/jquery.js": JQUERY_SOURCE, "dist/jquery.min.js": JQUERY_MIN},
    )
    write_package(
        root,
        "socket.io-stream",
        {"name": "socket.io-stream", "version": "0.9.1"},
        {"socket.io-stream.js": SOCKET_STREAM_SOURCE},
    )
    write_package(
        root,
        "bootstrap",
        {
            "name": "bootstrap",
            "version": "4.3.1",
            "main": "dist/js/bootstrap.js",
            "style": "dist/css/bootstrap.css",
        },
        {
            "dist/js/bootstrap.js": "var bootstrap = {};\n",
            "dist/css/bootstrap.css": BOOTSTRAP_CSS,
        },
    )
    return root
