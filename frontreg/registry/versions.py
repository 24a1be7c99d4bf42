"""Version matching against npm-style semver ranges."""

from __future__ import annotations

from nodesemver import satisfies as _range_satisfies

from frontreg.registry.library import SpecialVersion


def satisfies(installed: str | None, requested: str) -> bool:
    """Check an installed version against a requested range.

    The ``latest`` sentinel accepts anything, including a missing version.
    Unparsable versions or ranges never match.
    """
    if requested == SpecialVersion.LATEST:
        return True
    if not installed or not isinstance(installed, str):
        return False
    try:
        return bool(_range_satisfies(installed, requested))
    except ValueError:
        return False
