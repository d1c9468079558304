"""Typed configuration loading and access.

The release pipeline runs with no configuration at all. An optional
``release.toml`` at the project root can rename the artifact, point at a
different target directory or tool binaries, and turn on command echoing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "ArtifactConfig",
    "ConfigError",
    "OutputConfig",
    "ReleaseConfig",
    "ToolsConfig",
    "load_config",
    "load_config_or_default",
    "DEFAULT_ARTIFACT_NAME",
    "DEFAULT_TARGET_DIR",
    "RELEASE_PROFILE",
]

DEFAULT_ARTIFACT_NAME = "terra-link"
DEFAULT_TARGET_DIR = "target"

# cargo writes `--release` output under <target_dir>/release
RELEASE_PROFILE = "release"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when release.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ArtifactConfig:
    """Where the build step leaves the binary."""

    name: str = DEFAULT_ARTIFACT_NAME
    target_dir: str = DEFAULT_TARGET_DIR


@dataclass(frozen=True, slots=True)
class ToolsConfig:
    """External programs the pipeline invokes."""

    cargo: str = "cargo"
    strip: str = "strip"


@dataclass(frozen=True, slots=True)
class OutputConfig:
    echo_commands: bool = False


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Main configuration container."""

    artifact: ArtifactConfig = field(default_factory=ArtifactConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create ReleaseConfig from a mapping (parsed TOML)."""
        artifact: StrDict = get_table(data, "artifact") or {}
        tools: StrDict = get_table(data, "tools") or {}
        output: StrDict = get_table(data, "output") or {}

        echo = get_bool(output, "echo_commands")

        return cls(
            artifact=ArtifactConfig(
                name=get_str(artifact, "name") or DEFAULT_ARTIFACT_NAME,
                target_dir=get_str(artifact, "target_dir") or DEFAULT_TARGET_DIR,
            ),
            tools=ToolsConfig(
                cargo=get_str(tools, "cargo") or "cargo",
                strip=get_str(tools, "strip") or "strip",
            ),
            output=OutputConfig(
                echo_commands=echo if echo is not None else False,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax in {path.name}: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to release.toml

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    return Ok(ReleaseConfig.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load config if the file exists, otherwise return the defaults.

    A present but broken file is still an error.
    """
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
