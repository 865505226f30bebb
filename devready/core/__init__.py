"""Core domain types and logic."""

from .config import AndroidConfig, Config, ConfigError, PathsConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result
from .workspace import Workspace, WorkspaceError, detect_workspace, ios_source_dir

__all__ = [
    # config
    "AndroidConfig",
    "Config",
    "ConfigError",
    "PathsConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    # workspace
    "Workspace",
    "WorkspaceError",
    "detect_workspace",
    "ios_source_dir",
]
