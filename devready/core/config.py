"""Typed configuration loading and access.

Configuration lives in an optional `devready.toml` at the workspace root:

    [android]
    sdk_root = "~/Android/Sdk"
    emulator = "~/Android/Sdk/emulator/emulator"
    sdkmanager = "~/Android/Sdk/cmdline-tools/latest/bin/sdkmanager"

    [paths]
    ios = "ios"

Every key is optional. Android binary paths default to locations under the
SDK root, which itself defaults to $ANDROID_HOME / $ANDROID_SDK_ROOT or the
Android Studio install location for the host platform.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from devready.platform.detection import Platform, detect_platform

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "AndroidConfig",
    "PathsConfig",
    "Config",
    "ConfigError",
    "CONFIG_FILE_NAME",
    "default_android_sdk_root",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "devready.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def default_android_sdk_root(
    platform: Platform | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Locate the Android SDK the way Android Studio lays it out."""
    env = os.environ if environ is None else environ
    for var in ("ANDROID_HOME", "ANDROID_SDK_ROOT"):
        value = env.get(var)
        if value:
            return Path(value).expanduser()

    home = Path.home()
    match platform or detect_platform():
        case Platform.MACOS:
            return home / "Library" / "Android" / "sdk"
        case Platform.WINDOWS:
            return home / "AppData" / "Local" / "Android" / "Sdk"
        case _:
            return home / "Android" / "Sdk"


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """Android toolchain locations."""

    sdk_root: Path
    emulator_binary: Path
    sdkmanager_binary: Path

    @classmethod
    def from_sdk_root(cls, sdk_root: Path, platform: Platform | None = None) -> AndroidConfig:
        plat = platform or detect_platform()
        return cls(
            sdk_root=sdk_root,
            emulator_binary=sdk_root / "emulator" / plat.exe_name("emulator"),
            sdkmanager_binary=sdk_root
            / "cmdline-tools"
            / "latest"
            / "bin"
            / plat.script_name("sdkmanager"),
        )

    @classmethod
    def default(cls) -> AndroidConfig:
        return cls.from_sdk_root(default_android_sdk_root())


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Relative paths within the workspace."""

    ios: str = "ios"


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    android: AndroidConfig = field(default_factory=AndroidConfig.default)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @classmethod
    def default(cls) -> Config:
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        android: StrDict = get_table(data, "android") or {}
        paths: StrDict = get_table(data, "paths") or {}

        sdk_root_text = get_str(android, "sdk_root")
        sdk_root = (
            Path(sdk_root_text).expanduser() if sdk_root_text else default_android_sdk_root()
        )
        defaults = AndroidConfig.from_sdk_root(sdk_root)

        emulator = get_str(android, "emulator")
        sdkmanager = get_str(android, "sdkmanager")

        return cls(
            android=AndroidConfig(
                sdk_root=sdk_root,
                emulator_binary=Path(emulator).expanduser()
                if emulator
                else defaults.emulator_binary,
                sdkmanager_binary=Path(sdkmanager).expanduser()
                if sdkmanager
                else defaults.sdkmanager_binary,
            ),
            paths=PathsConfig(ios=get_str(paths, "ios") or "ios"),
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
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to devready.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return defaults if it is missing or invalid."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config.default()
