"""Registry — resolve library requests against installed packages.

The registry provides:
- Discovery: find a library's directory across ordered search roots
- Versioning: check the installed version against an npm-style range
- Resolution: pick the entry file, honouring explicit path overrides
- Minification: serve a shipped minified artifact or synthesize one
"""

from frontreg.registry.base import (
    LibraryDoesNotExist,
    NoMain,
    NoMinifiedPath,
    Registry,
    RegistryError,
    VersionDoesNotMatch,
)
from frontreg.registry.library import FileType, Library, SpecialFile, SpecialVersion
from frontreg.registry.local_registry import LocalRegistry

__all__ = [
    "FileType",
    "Library",
    "LibraryDoesNotExist",
    "LocalRegistry",
    "NoMain",
    "NoMinifiedPath",
    "Registry",
    "RegistryError",
    "SpecialFile",
    "SpecialVersion",
    "VersionDoesNotMatch",
]
