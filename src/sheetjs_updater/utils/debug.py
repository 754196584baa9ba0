# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""통합 로깅 모듈

사용법:
    from ..utils.debug import get_logger

    log = get_logger("ModuleName")
    log.debug("디버그 메시지")
    log.warning("경고 메시지")

로그 파일: ~/.sheetjs_updater/logs/debug.log (DEBUG 이하 레벨에서만)
환경 변수 SHEETJS_UPDATER_DEBUG=1 (DEBUG) 또는 2 (TRACE)로 레벨 지정
"""

import os
import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, TextIO

from ..config import APP_DATA_DIR


def _get_logs_dir() -> Path:
    return APP_DATA_DIR / "logs"


class LogLevel(IntEnum):
    """로그 레벨

    TRACE: 피드 항목 단위 상세 로그
    DEBUG: 단계별 진행 상황
    INFO: 업데이트 적용 등 사용자 인지 필요
    WARNING: 복구 가능한 문제 (잘못된 피드 항목 건너뜀 등)
    ERROR: 작업 실패
    NONE: 로깅 비활성화
    """
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5


DEBUG_ENV_VAR = "SHEETJS_UPDATER_DEBUG"
_ENV_LEVELS = {"1": LogLevel.DEBUG, "2": LogLevel.TRACE}


def level_from_env(value: Optional[str]) -> LogLevel:
    """환경 변수 값 → 로그 레벨. 1: DEBUG, 2: TRACE, 그 외 WARNING"""
    return _ENV_LEVELS.get((value or "").strip(), LogLevel.WARNING)


_global_level = level_from_env(os.environ.get(DEBUG_ENV_VAR))

_log_file: Optional[TextIO] = None
_log_file_path: Optional[Path] = None


def _init_log_file() -> None:
    """로그 파일 초기화"""
    global _log_file, _log_file_path
    if _global_level > LogLevel.DEBUG:
        return
    try:
        logs_dir = _get_logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)

        _log_file_path = logs_dir / "debug.log"
        _log_file = open(_log_file_path, "a", encoding="utf-8")
        _log_file.write(f"\n{'='*60}\n")
        _log_file.write(f"Session started: {datetime.now().isoformat()}\n")
        _log_file.write(f"{'='*60}\n")
        _log_file.flush()
    except OSError:
        _log_file = None


if _global_level <= LogLevel.DEBUG:
    _init_log_file()


class Logger:
    """콘솔 + 파일 로거"""

    def __init__(self, name: str, level: Optional[LogLevel] = None):
        self.name = name
        self.level = level if level is not None else _global_level

    def _log(self, level: LogLevel, msg: str) -> None:
        if level < self.level:
            return

        line = f"[{level.name}:{self.name}] {msg}"

        # 경고 이상은 stderr
        stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
        print(line, file=stream)

        if _log_file:
            try:
                _log_file.write(f"{line}\n")
                _log_file.flush()
            except OSError:
                pass

    def trace(self, msg: str) -> None:
        self._log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._log(LogLevel.ERROR, msg)


# 로거 캐시
_loggers: dict[str, Logger] = {}


def get_logger(name: str) -> Logger:
    """이름으로 로거 가져오기 (캐싱)"""
    if name not in _loggers:
        _loggers[name] = Logger(name)
    return _loggers[name]


def set_global_level(level: LogLevel) -> None:
    """전역 로그 레벨 설정. CLI --debug/--trace 옵션용."""
    global _global_level
    _global_level = level
    for logger in _loggers.values():
        logger.level = level
    if _log_file is None and level <= LogLevel.DEBUG:
        _init_log_file()


def get_global_level() -> LogLevel:
    return _global_level


def get_log_file_path() -> Optional[str]:
    """로그 파일 경로 반환"""
    return str(_log_file_path) if _log_file_path else None
