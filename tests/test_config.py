"""Tests for the configuration module."""

from pathlib import Path

import pytest

from rkutils._cli.config import (
    ConfigError,
    RkutilsConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for loading [tool.rkutils]."""

    def test_relative_paths_resolve_from_project_root(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.rkutils]
graph = "data/deps.toml"
routes = "routes.toml"
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "data" / "deps.toml"
        assert config.routes == tmp_path / "routes.toml"
        assert config.project_root == tmp_path

    def test_absolute_path_is_kept(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere" / "deps.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.rkutils]\ngraph = "{absolute.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == absolute
        assert config.routes is None

    def test_no_tool_rkutils_section(self, tmp_path: Path) -> None:
        """Should return an empty config when the section is missing."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == RkutilsConfig(project_root=tmp_path)

    def test_invalid_path_type_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.rkutils]\ngraph = 123\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.rkutils\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_section_must_be_a_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\nrkutils = "deps.toml"\n')

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.rkutils]\nroutes = "routes.toml"\n')
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.routes == tmp_path.resolve() / "routes.toml"


class TestRkutilsConfig:
    def test_default_values(self) -> None:
        config = RkutilsConfig()

        assert config.graph is None
        assert config.routes is None
        assert config.project_root is None

    def test_frozen(self) -> None:
        config = RkutilsConfig()

        with pytest.raises(AttributeError):
            config.graph = Path("deps.toml")  # type: ignore[misc]
