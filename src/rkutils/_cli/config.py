"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in rkutils configuration."""


@dataclass(slots=True, frozen=True)
class RkutilsConfig:
    """Configuration loaded from the [tool.rkutils] section of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    routes: Path | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_path(section: dict[str, object], key: str, project_root: Path) -> Path | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.rkutils].{key}: expected string path"
        raise ConfigError(msg)
    path = Path(value)
    if not path.is_absolute():
        path = project_root / path
    return path


def load_config(pyproject_path: Path) -> RkutilsConfig:
    """Load and validate [tool.rkutils] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed RkutilsConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("rkutils", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.rkutils] configuration: expected a table"
        raise ConfigError(msg)

    return RkutilsConfig(
        graph=_parse_path(section, "graph", project_root),
        routes=_parse_path(section, "routes", project_root),
        project_root=project_root,
    )


def get_config() -> RkutilsConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        RkutilsConfig (may be empty if no pyproject.toml or no [tool.rkutils] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return RkutilsConfig()
    return load_config(pyproject_path)
