"""Registry interface and the error kinds every registry raises."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from frontreg.registry.library import Library


class RegistryError(Exception):
    """Base class for resolution failures; carries the requested library."""

    def __init__(self, lib: Library, message: str = ""):
        self.lib = lib
        super().__init__(message or f"{type(self).__name__}: {lib.name}")


class LibraryDoesNotExist(RegistryError):
    """The library, or a specifically requested file of it, is not on disk."""


class VersionDoesNotMatch(RegistryError):
    """The installed version does not satisfy the requested range."""


class NoMain(RegistryError):
    """No entry file could be resolved for the library."""


class NoMinifiedPath(RegistryError):
    """A minified file was requested but no minified path was given."""


class Registry(ABC):
    """A source of front-end libraries."""

    @abstractmethod
    def get_manifest(self, lib: Library) -> dict:
        """Return the parsed package manifest of the library."""

    @abstractmethod
    def get_path(self, lib: Library) -> Path:
        """Return the path of the library's entry file."""

    @abstractmethod
    def get_minified_path(self, lib: Library) -> Path:
        """Return the path of the library's pre-built minified file."""

    @abstractmethod
    def get(self, lib: Library) -> str:
        """Return the contents of the library's entry file."""

    @abstractmethod
    def get_minified(self, lib: Library) -> str:
        """Return minified contents, synthesizing them when needed."""
