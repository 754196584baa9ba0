# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""설정 저장/로드 모듈

JSON 기반 설정 영속화. CLI 인자가 없을 때의 기본값을 제공한다.
"""

import copy
import json
from typing import Any, Optional

from .config import APP_DATA_DIR, CDN_URL_TEMPLATE, DEFAULT_FEED_URL, DEFAULT_PACKAGE
from .utils.debug import get_logger

log = get_logger("Settings")

# 기본 설정값
DEFAULT_SETTINGS = {
    "feed": {
        "url": DEFAULT_FEED_URL,
        "skip_invalid": False,
    },
    "dependency": {
        "package": DEFAULT_PACKAGE,
        "directory": ".",
        "url_template": CDN_URL_TEMPLATE,
    },
    "update": {
        "last_check_timestamp": 0,
        "last_installed_version": None,
    },
}


class Settings:
    """설정 관리 클래스"""

    def __init__(self):
        self.path = APP_DATA_DIR / "settings.json"
        self._data: dict = {}
        self._load()

    def _load(self) -> None:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
                log.debug(f"settings loaded: {self.path}")
            except (json.JSONDecodeError, OSError) as e:
                log.warning(f"settings load failed, using defaults: {e}")
                self._data = {}
        else:
            self._data = {}

        if not isinstance(self._data, dict):
            log.warning("settings file is not an object, using defaults")
            self._data = {}

        # 기본값으로 누락된 키 채우기
        self._merge_defaults()

    def _merge_defaults(self) -> None:
        self._data = self._deep_merge(DEFAULT_SETTINGS, self._data)

    def _deep_merge(self, base: dict, override: dict) -> dict:
        result = copy.deepcopy(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def save(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2)
            log.debug(f"settings saved: {self.path}")
            return True
        except OSError as e:
            log.error(f"settings save failed: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """점 표기법: "feed.url" """
        keys = key.split(".")
        value = self._data
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """점 표기법: "feed.url" """
        keys = key.split(".")
        data = self._data
        for k in keys[:-1]:
            if k not in data or not isinstance(data[k], dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def get_feed_url(self) -> str:
        return self.get("feed.url", DEFAULT_FEED_URL)

    def get_package(self) -> str:
        return self.get("dependency.package", DEFAULT_PACKAGE)

    def get_directory(self) -> str:
        return self.get("dependency.directory", ".")

    def get_url_template(self) -> str:
        return self.get("dependency.url_template", CDN_URL_TEMPLATE)

    def get_skip_invalid(self) -> bool:
        return bool(self.get("feed.skip_invalid", False))

    def get_last_update_check(self) -> float:
        return self.get("update.last_check_timestamp", 0)

    def set_last_update_check(self, timestamp: float) -> None:
        self.set("update.last_check_timestamp", timestamp)

    def set_last_installed_version(self, version: str) -> None:
        self.set("update.last_installed_version", version)


# 전역 싱글톤 인스턴스
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
