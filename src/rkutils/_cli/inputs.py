"""Input file models for the CLI.

Both file formats are TOML documents validated with pydantic:

    # graph file
    [dependencies]
    app = ["lib", "config"]
    lib = []

    # routes file
    [routes]
    "/" = "index"
    "/cloud" = "cloud"
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class InputFileError(Exception):
    """Raised when a graph or routes file cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class GraphFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dependencies: dict[str, list[str]] = {}


class RoutesFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    routes: dict[str, str] = {}


def _load_toml(path: Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise InputFileError(path, "file not found") from e
    except OSError as e:
        raise InputFileError(path, f"cannot read file: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise InputFileError(path, f"invalid TOML: {e}") from e


def load_graph_file(path: Path) -> GraphFile:
    """Read and validate a dependency graph file."""
    try:
        graph_file = GraphFile.model_validate(_load_toml(path))
    except ValidationError as e:
        raise InputFileError(path, str(e)) from e
    logger.debug(f"Loaded {len(graph_file.dependencies)} graph entries from {path}")
    return graph_file


def load_routes_file(path: Path) -> RoutesFile:
    """Read and validate a routes file."""
    try:
        routes_file = RoutesFile.model_validate(_load_toml(path))
    except ValidationError as e:
        raise InputFileError(path, str(e)) from e
    logger.debug(f"Loaded {len(routes_file.routes)} routes from {path}")
    return routes_file
