# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""메인 진입점 - 피드 조회 → 버전 비교 → 재설치"""

import argparse
import sys
import time
from typing import List, Optional

from .__about__ import __version__
from .config import APP_DISPLAY_NAME
from .settings import get_settings
from .updater import UpdaterError, UpdateStatus, check_for_update, start_update
from .utils.debug import LogLevel, get_log_file_path, get_logger, set_global_level

log = get_logger("Main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """CLI 인자 파싱. 지정하지 않은 값은 설정 파일 값을 사용."""
    parser = argparse.ArgumentParser(
        prog='sheetjs-updater',
        description=APP_DISPLAY_NAME,
    )

    parser.add_argument(
        '--url', '-u',
        help='릴리스 RSS 피드 URL'
    )

    parser.add_argument(
        '--directory', '-d',
        help='package.json이 있는 디렉토리'
    )

    parser.add_argument(
        '--package', '-p',
        help='확인할 의존성 이름 (기본: xlsx)'
    )

    parser.add_argument(
        '--skip-invalid',
        action='store_true',
        default=None,
        help='버전으로 해석할 수 없는 피드 항목은 건너뜀 (기본: 중단)'
    )

    parser.add_argument(
        '--dry-run', '-n',
        action='store_true',
        help='업데이트 필요 여부만 확인, 설치하지 않음'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='디버그 로그 활성화'
    )

    parser.add_argument(
        '--trace',
        action='store_true',
        help='TRACE 레벨 활성화 (--debug 포함)'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    settings = get_settings()

    url = args.url or settings.get_feed_url()
    directory = args.directory or settings.get_directory()
    package = args.package or settings.get_package()
    skip_invalid = settings.get_skip_invalid() if args.skip_invalid is None else args.skip_invalid

    print(f"Fetching releases from {url}")
    result = check_for_update(
        url,
        directory,
        package,
        skip_invalid=skip_invalid,
        url_template=settings.get_url_template(),
    )

    settings.set_last_update_check(time.time())
    settings.save()

    if result.status is UpdateStatus.NO_RELEASES:
        print("No releases found in the feed")
        return 0
    latest = result.latest_release
    print(f"Latest release: {latest.version} ({latest.link})")

    if result.status is UpdateStatus.NOT_INSTALLED:
        print(f"{package} is not found in the package.json file")
        return 0
    print(f"Current version: {result.current_version}")

    if result.status is UpdateStatus.UP_TO_DATE:
        print("The current version is up to date")
        return 0

    info = result.update_info
    print(f"A new version is available: {info.version}")

    if args.dry_run:
        print(f"Dry run, would install {info.download_url}")
        return 0

    print(f"Installing {info.download_url}")
    if not start_update(info, directory):
        print(f"Failed to install {package} {info.version}", file=sys.stderr)
        return 1

    settings.set_last_installed_version(info.version)
    settings.save()
    print(f"{package} updated to {info.version}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """진입점

    Returns:
        0: 정상 종료 (업데이트 적용/불필요/dry run)
        1: 오류 종료
    """
    args = parse_args(argv)

    if args.trace:
        set_global_level(LogLevel.TRACE)
    elif args.debug:
        set_global_level(LogLevel.DEBUG)

    if get_log_file_path():
        log.debug(f"log file: {get_log_file_path()}")

    try:
        return run(args)
    except UpdaterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
