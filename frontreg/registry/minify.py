"""Minifiers for library content, selected by file type."""

from __future__ import annotations

import rcssmin
import rjsmin

from frontreg.registry.library import FileType


def minify_js(source: str) -> str:
    return rjsmin.jsmin(source)


def minify_css(source: str) -> str:
    return rcssmin.cssmin(source)


_MINIFIERS = {
    FileType.JS: minify_js,
    FileType.CSS: minify_css,
}


def minify(source: str, file_type: FileType) -> str:
    """Minify ``source`` with the minifier for ``file_type``."""
    try:
        minifier = _MINIFIERS[file_type]
    except KeyError:
        raise ValueError(f"No minifier for file type: {file_type!r}") from None
    return minifier(source)
