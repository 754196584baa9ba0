# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""업데이트 설치. npm rm → npm install <CDN tarball URL>."""

import subprocess
from pathlib import Path
from typing import List, Union

from ..config import CDN_URL_TEMPLATE, NPM_EXECUTABLE, NPM_TIMEOUT
from ..utils.debug import get_logger

log = get_logger("Installer")


def build_download_url(package: str, version: str, template: str = CDN_URL_TEMPLATE) -> str:
    """설치할 tarball URL. 예: https://cdn.sheetjs.com/xlsx-0.20.2/xlsx-0.20.2.tgz"""
    return template.format(package=package, version=version)


def _run_npm(args: List[str], directory: Union[str, Path]) -> bool:
    command = [NPM_EXECUTABLE, *args]
    log.debug(f"running {' '.join(command)} in {directory}")

    try:
        result = subprocess.run(
            command,
            cwd=str(directory),
            capture_output=True,
            text=True,
            timeout=NPM_TIMEOUT,
        )
    except FileNotFoundError:
        log.error(f"{NPM_EXECUTABLE} not found in PATH")
        return False
    except subprocess.TimeoutExpired:
        log.error(f"{' '.join(command)} timed out after {NPM_TIMEOUT}s")
        return False

    if result.returncode != 0:
        log.error(f"{' '.join(command)} failed (exit={result.returncode}): {result.stderr.strip()}")
        return False

    log.trace(result.stdout.strip())
    return True


def uninstall_package(package: str, directory: Union[str, Path]) -> bool:
    """현재 설치본 제거."""
    return _run_npm(["rm", package], directory)


def install_package(url: str, directory: Union[str, Path]) -> bool:
    """tarball URL로 설치."""
    return _run_npm(["install", url], directory)


def apply_update(package: str, download_url: str, directory: Union[str, Path]) -> bool:
    """기존 버전 제거 후 새 버전 설치. 성공 여부 반환."""
    log.info(f"uninstalling current {package}")
    if not uninstall_package(package, directory):
        return False

    log.info(f"installing {download_url}")
    if not install_package(download_url, directory):
        return False

    log.info(f"{package} updated")
    return True
