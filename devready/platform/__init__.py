"""Platform abstraction layer."""

from .detection import Platform, detect_platform
from .files import all_exist, exists
from .process import ProcessError, ProcessOutput, run, split_command

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    # files
    "all_exist",
    "exists",
    # process
    "ProcessError",
    "ProcessOutput",
    "run",
    "split_command",
]
