# SPDX-License-Identifier: MIT
"""installer 모듈 단위 테스트."""

import subprocess
from unittest.mock import MagicMock

import pytest

from sheetjs_updater.updater.installer import (
    apply_update,
    build_download_url,
    install_package,
    uninstall_package,
)

DOWNLOAD_URL = "https://cdn.sheetjs.com/xlsx-0.20.2/xlsx-0.20.2.tgz"


def _completed(returncode=0, stdout="", stderr=""):
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def mock_run(mocker):
    return mocker.patch(
        "sheetjs_updater.updater.installer.subprocess.run",
        return_value=_completed(),
    )


class TestBuildDownloadUrl:
    """설치 URL 생성 테스트."""

    def test_default_template(self):
        assert build_download_url("xlsx", "0.20.2") == DOWNLOAD_URL

    def test_custom_template(self):
        url = build_download_url("xlsx", "0.20.2", "https://mirror.local/{package}/{version}.tgz")
        assert url == "https://mirror.local/xlsx/0.20.2.tgz"


class TestNpmCommands:
    """npm 호출 테스트."""

    def test_uninstall(self, mock_run, tmp_path):
        assert uninstall_package("xlsx", tmp_path) is True

        args, kwargs = mock_run.call_args
        assert args[0] == ["npm", "rm", "xlsx"]
        assert kwargs["cwd"] == str(tmp_path)

    def test_install(self, mock_run, tmp_path):
        assert install_package(DOWNLOAD_URL, tmp_path) is True
        assert mock_run.call_args[0][0] == ["npm", "install", DOWNLOAD_URL]

    def test_nonzero_exit(self, mock_run, tmp_path):
        mock_run.return_value = _completed(returncode=1, stderr="npm ERR! 404")
        assert install_package(DOWNLOAD_URL, tmp_path) is False

    def test_npm_missing(self, mock_run, tmp_path):
        mock_run.side_effect = FileNotFoundError("npm")
        assert uninstall_package("xlsx", tmp_path) is False

    def test_timeout(self, mock_run, tmp_path):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="npm", timeout=300)
        assert install_package(DOWNLOAD_URL, tmp_path) is False


class TestApplyUpdate:
    """apply_update 순서 테스트."""

    def test_uninstall_then_install(self, mock_run, tmp_path):
        assert apply_update("xlsx", DOWNLOAD_URL, tmp_path) is True

        commands = [c[0][0] for c in mock_run.call_args_list]
        assert commands == [
            ["npm", "rm", "xlsx"],
            ["npm", "install", DOWNLOAD_URL],
        ]

    def test_uninstall_failure_stops(self, mock_run, tmp_path):
        mock_run.return_value = _completed(returncode=1, stderr="boom")

        assert apply_update("xlsx", DOWNLOAD_URL, tmp_path) is False
        assert mock_run.call_count == 1

    def test_install_failure(self, mock_run, tmp_path):
        mock_run.side_effect = [_completed(), _completed(returncode=1, stderr="boom")]

        assert apply_update("xlsx", DOWNLOAD_URL, tmp_path) is False
        assert mock_run.call_count == 2
