"""Local file-based registry implementation.

Resolves libraries installed under one or more search roots (usually
``node_modules`` directories). Each library lives in ``<root>/<name>`` with a
``package.json`` manifest. Nothing is cached: every call re-reads the disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from frontreg.registry.base import (
    LibraryDoesNotExist,
    NoMain,
    NoMinifiedPath,
    Registry,
    VersionDoesNotMatch,
)
from frontreg.registry.library import Library
from frontreg.registry.minify import minify
from frontreg.registry.versions import satisfies

logger = logging.getLogger(__name__)


class LocalRegistry(Registry):
    """Filesystem-backed registry over an ordered list of search roots."""

    MANIFEST_FILE = "package.json"

    def __init__(self, search_roots: Iterable[str | Path]):
        self.search_roots: tuple[Path, ...] = tuple(Path(r).absolute() for r in search_roots)

    def get_lib_dir(self, lib: Library) -> Path | None:
        """Return the first ``<root>/<name>`` directory, or None."""
        for root in self.search_roots:
            candidate = root / lib.name
            if candidate.is_dir():
                logger.debug("Found %s in %s", lib.name, root)
                return candidate
        return None

    def get_manifest(self, lib: Library) -> dict:
        lib_dir = self._require_lib_dir(lib)
        return self._read_manifest(lib, lib_dir)

    def get_path(self, lib: Library) -> Path:
        lib_dir, manifest = self._resolve(lib, need_main=lib.wants_main)

        if lib.wants_main:
            relative = manifest.get("main")
            if not relative or not isinstance(relative, str):
                raise NoMain(lib, f"{lib.name} declares no main file")
        else:
            relative = lib.path

        path = _join(lib_dir, relative)
        logger.debug("Resolved %s entry to %s", lib.name, path)
        if not path.is_file():
            raise NoMain(lib, f"Main file for {lib.name} does not exist: {path}")
        return path

    def get_minified_path(self, lib: Library) -> Path:
        lib_dir, _ = self._resolve(lib)

        if lib.minified_path is None:
            raise NoMinifiedPath(lib, f"No minified path given for {lib.name}")

        path = _join(lib_dir, lib.minified_path)
        if not path.is_file():
            raise LibraryDoesNotExist(
                lib, f"Minified file for {lib.name} does not exist: {path}"
            )
        return path

    def get(self, lib: Library) -> str:
        return _read_text(self.get_path(lib))

    def get_minified(self, lib: Library) -> str:
        try:
            path = self.get_minified_path(lib)
        except NoMinifiedPath:
            logger.debug("Minifying %s as %s", lib.name, lib.file_type.value)
            return minify(self.get(lib), lib.file_type)
        return _read_text(path)

    # -- internals ---------------------------------------------------------

    def _require_lib_dir(self, lib: Library) -> Path:
        lib_dir = self.get_lib_dir(lib)
        if lib_dir is None:
            raise LibraryDoesNotExist(
                lib, f"{lib.name} not found in any search root"
            )
        return lib_dir

    def _read_manifest(self, lib: Library, lib_dir: Path) -> dict:
        manifest_path = lib_dir / self.MANIFEST_FILE
        try:
            with open(manifest_path, encoding="utf-8") as f:
                manifest = json.load(f)
        except FileNotFoundError:
            raise LibraryDoesNotExist(lib, f"{lib.name} has no {self.MANIFEST_FILE}") from None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LibraryDoesNotExist(
                lib, f"{lib.name} has an invalid {self.MANIFEST_FILE}: {e}"
            ) from e

        if not isinstance(manifest, dict):
            raise LibraryDoesNotExist(lib, f"{lib.name} has an invalid {self.MANIFEST_FILE}")
        return manifest

    def _resolve(self, lib: Library, need_main: bool = False) -> tuple[Path, dict]:
        """Find the library directory and check its version.

        The manifest is only read when a version range or the main entry
        needs it, so explicit paths work for packages without one.
        """
        lib_dir = self._require_lib_dir(lib)
        if lib.wants_latest and not need_main:
            return lib_dir, {}
        manifest = self._read_manifest(lib, lib_dir)

        installed = manifest.get("version")
        if not satisfies(installed, lib.version):
            raise VersionDoesNotMatch(
                lib, f"{lib.name}@{installed} does not satisfy {lib.version}"
            )
        return lib_dir, manifest


def _join(lib_dir: Path, relative: str) -> Path:
    # Paths are relative to the library even when written "/dist/x.js"
    return lib_dir / relative.lstrip("/")


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF and other line endings as they are on disk
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
