# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""공용 유틸리티 패키지"""

from .debug import (
    LogLevel,
    get_global_level,
    get_log_file_path,
    get_logger,
    set_global_level,
)

__all__ = [
    "LogLevel",
    "get_global_level",
    "get_log_file_path",
    "get_logger",
    "set_global_level",
]
