"""Registry configuration — where to look for installed libraries.

Search roots come from, in order of precedence: explicit CLI roots, the
``FRONTREG_SEARCH_ROOTS`` environment variable (``os.pathsep``-separated),
a YAML config file with a ``search_roots`` list, and finally
``./node_modules``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from frontreg.registry.local_registry import LocalRegistry

ENV_SEARCH_ROOTS = "FRONTREG_SEARCH_ROOTS"
DEFAULT_CONFIG_FILE = "frontreg.yaml"
DEFAULT_SEARCH_ROOT = "node_modules"


class ConfigError(ValueError):
    """Raised when a config file cannot be used."""


@dataclass
class RegistryConfig:
    """Effective registry configuration."""

    search_roots: list[Path] = field(default_factory=list)
    source: str = "default"  # cli | env | file | default


def load_config(
    roots: list[str] | tuple[str, ...] = (),
    config_path: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> RegistryConfig:
    """Work out the search roots from the available sources."""
    if roots:
        return RegistryConfig(search_roots=[Path(r) for r in roots], source="cli")

    env = os.environ if environ is None else environ
    env_roots = [r for r in env.get(ENV_SEARCH_ROOTS, "").split(os.pathsep) if r]
    if env_roots:
        return RegistryConfig(search_roots=[Path(r) for r in env_roots], source="env")

    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILE)
    if config_path or path.exists():
        return RegistryConfig(search_roots=_read_config_file(path), source="file")

    return RegistryConfig(search_roots=[Path(DEFAULT_SEARCH_ROOT)])


def build_registry(config: RegistryConfig) -> LocalRegistry:
    return LocalRegistry(config.search_roots)


def _read_config_file(path: Path) -> list[Path]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    roots = data.get("search_roots")
    if not isinstance(roots, list) or not roots:
        raise ConfigError(f"{path}: 'search_roots' must be a non-empty list")

    bad = [r for r in roots if not isinstance(r, str) or not r]
    if bad:
        raise ConfigError(f"{path}: search_roots entries must be non-empty strings, got {bad!r}")

    # Relative roots are relative to the config file, not the cwd
    base = path.parent
    return [base / r for r in roots]
