"""Resolve where a config store keeps its JSON file."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

MANIFEST_NAME = "pyproject.toml"


class ConfigurationError(RuntimeError):
    """Raised when no location for the config file can be determined."""


def find_manifest(start: Path) -> Optional[Path]:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    start = Path(start).expanduser().resolve()
    if start.is_file():
        start = start.parent
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def infer_project_name(search_from: Path) -> Optional[str]:
    manifest = find_manifest(search_from)
    if manifest is None:
        return None
    try:
        with manifest.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Could not read project manifest {manifest}: {exc}") from exc
    name = data.get("project", {}).get("name") or data.get("tool", {}).get("poetry", {}).get("name")
    return name or None


def resolve_config_path(
    cwd: Path | str | None = None,
    project_name: Optional[str] = None,
    config_name: str = "config",
    search_from: Path | str | None = None,
) -> Path:
    if cwd is None and not project_name and search_from is not None:
        project_name = infer_project_name(Path(search_from))

    if cwd is None and not project_name:
        raise ConfigurationError(
            "Project name could not be inferred. Please specify `project_name` or `cwd`."
        )

    if cwd is None:
        directory = Path(user_config_dir(project_name, appauthor=False))
    else:
        directory = Path(cwd).expanduser()
    return (directory / f"{config_name}.json").resolve()
