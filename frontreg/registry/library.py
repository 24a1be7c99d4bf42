"""Library request descriptor — what a caller asks the registry for."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpecialVersion(str, Enum):
    """Sentinel values accepted in place of a semver range."""

    LATEST = "latest"  # Accept whatever version is installed


class SpecialFile(str, Enum):
    """Sentinel values accepted in place of an explicit file path."""

    MAIN = "main"  # Use the manifest's declared main entry


class FileType(Enum):
    """Content type of a library file; selects the minifier."""

    JS = "js"
    CSS = "css"


@dataclass(frozen=True)
class Library:
    """A request for an installed front-end library.

    ``version`` and ``path`` fall back to their sentinels when left out or
    passed as ``None``/empty, so callers can forward optional values as-is.
    Paths are relative to the library directory; a leading ``/`` is allowed.
    """

    name: str
    version: str = SpecialVersion.LATEST.value
    path: str = SpecialFile.MAIN.value
    minified_path: str | None = None
    file_type: FileType = FileType.JS

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Library name must be a non-empty string")
        if not self.version:
            object.__setattr__(self, "version", SpecialVersion.LATEST.value)
        if not self.path:
            object.__setattr__(self, "path", SpecialFile.MAIN.value)
        if not self.minified_path:
            object.__setattr__(self, "minified_path", None)
        if self.file_type is None:
            object.__setattr__(self, "file_type", FileType.JS)
        elif not isinstance(self.file_type, FileType):
            object.__setattr__(self, "file_type", FileType(self.file_type))

    @property
    def wants_latest(self) -> bool:
        return self.version == SpecialVersion.LATEST

    @property
    def wants_main(self) -> bool:
        return self.path == SpecialFile.MAIN
