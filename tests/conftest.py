# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""pytest 공용 fixtures."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# 파일 fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def rss_body():
    """4개 항목 (v0.20.2, v0.20.1, v0.7.6-a, v0.7.6) RSS 본문."""
    return (FIXTURES_DIR / "tags.rss").read_bytes()


@pytest.fixture
def make_project(tmp_path):
    """dependencies로 package.json을 만든 디렉토리 반환."""

    def _make(dependencies=None, raw=None):
        project = tmp_path / "project"
        project.mkdir(exist_ok=True)
        manifest = project / "package.json"
        if raw is not None:
            manifest.write_text(raw, encoding="utf-8")
        else:
            data = {"name": "project", "version": "1.0.0"}
            if dependencies is not None:
                data["dependencies"] = dependencies
            manifest.write_text(json.dumps(data), encoding="utf-8")
        return project

    return _make


# =============================================================================
# 네트워크 모킹 fixtures
# =============================================================================


class FakeResponse:
    """urlopen 컨텍스트 매니저 대용."""

    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def mock_urlopen(mocker):
    """urlopen이 body를 돌려주도록 모킹. 반환된 함수에 body 지정."""
    mock = mocker.patch("sheetjs_updater.updater.feed_client.urllib.request.urlopen")

    def _set(body: bytes):
        mock.return_value = FakeResponse(body)
        return mock

    return _set


# =============================================================================
# 설정 fixtures
# =============================================================================


@pytest.fixture
def temp_settings(tmp_path):
    """임시 경로를 사용하는 Settings. get_settings()가 이 인스턴스를 반환."""
    from sheetjs_updater import settings as settings_module
    from sheetjs_updater.settings import Settings

    with patch.object(Settings, "__init__", lambda self: None):
        s = Settings()
    s.path = tmp_path / ".sheetjs_updater" / "settings.json"
    s._data = {}
    s._load()

    with patch.object(settings_module, "_settings_instance", s):
        yield s
