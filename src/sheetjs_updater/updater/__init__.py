# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""릴리스 피드 기반 의존성 업데이트."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .errors import (
    FeedError,
    MalformedDependencyUrl,
    ManifestError,
    ParseError,
    UpdaterError,
)
from .feed_client import FeedItem, get_feed_items
from .installer import apply_update, build_download_url
from .manifest import extract_installed_version, get_current_version
from .release import Release, find_latest_release, to_releases
from .version import Version, parse_version
from ..config import CDN_URL_TEMPLATE
from ..utils.debug import get_logger

log = get_logger("Updater")

__all__ = [
    "FeedError",
    "FeedItem",
    "MalformedDependencyUrl",
    "ManifestError",
    "ParseError",
    "Release",
    "UpdateCheck",
    "UpdateInfo",
    "UpdateStatus",
    "UpdaterError",
    "Version",
    "check_for_update",
    "extract_installed_version",
    "find_latest_release",
    "find_latest_release_from_feed",
    "is_update_required",
    "parse_version",
    "start_update",
    "to_releases",
]


@dataclass(frozen=True)
class UpdateInfo:

    package: str
    current_version: Version
    latest_release: Release
    download_url: str

    @property
    def version(self) -> str:
        return str(self.latest_release.version)


def is_update_required(installed: Optional[Version], latest: Version) -> bool:
    """설치 버전이 최신보다 낮으면 True. 미설치(None)면 False."""
    if installed is None:
        return False
    return installed < latest


def find_latest_release_from_feed(url: str, skip_invalid: bool = False) -> Optional[Release]:
    """피드에서 최신 릴리스 조회. 피드가 비어 있으면 None.

    Raises:
        FeedError: 피드 조회 실패
        ParseError: skip_invalid=False이고 제목 파싱 실패
    """
    items = get_feed_items(url)
    if items is None:
        raise FeedError(url, "request failed")
    log.debug(f"found {len(items)} feed items")

    releases = to_releases(items, skip_invalid=skip_invalid)
    log.debug(f"found {len(releases)} releases")

    latest = find_latest_release(releases)
    log.debug(f"latest release: {latest}")
    return latest


class UpdateStatus(Enum):
    NO_RELEASES = "no_releases"
    NOT_INSTALLED = "not_installed"
    UP_TO_DATE = "up_to_date"
    AVAILABLE = "available"


@dataclass(frozen=True)
class UpdateCheck:
    """업데이트 확인 결과.

    latest_release는 NO_RELEASES가 아니면 항상 있음.
    current_version은 UP_TO_DATE/AVAILABLE일 때, update_info는 AVAILABLE일 때만 있음.
    """

    status: UpdateStatus
    latest_release: Optional[Release] = None
    current_version: Optional[Version] = None
    update_info: Optional[UpdateInfo] = None


def check_for_update(
    feed_url: str,
    directory: Union[str, Path],
    package: str,
    skip_invalid: bool = False,
    url_template: str = CDN_URL_TEMPLATE,
) -> UpdateCheck:
    """피드 최신 릴리스와 설치 버전 비교.

    피드가 비었거나(NO_RELEASES), 의존성이 없거나(NOT_INSTALLED),
    이미 최신이면(UP_TO_DATE) update_info 없음.

    Raises:
        FeedError: 피드 조회 실패
        ParseError: 피드 제목 또는 설치 버전 파싱 실패
        MalformedDependencyUrl: 의존성 값이 URL 규칙과 다름
        ManifestError: package.json 읽기 실패
    """
    latest = find_latest_release_from_feed(feed_url, skip_invalid=skip_invalid)
    if latest is None:
        log.info(f"no releases in feed {feed_url}")
        return UpdateCheck(UpdateStatus.NO_RELEASES)

    installed = get_current_version(directory, package)
    if installed is None:
        log.debug(f"{package} not found in manifest, nothing to compare")
        return UpdateCheck(UpdateStatus.NOT_INSTALLED, latest_release=latest)

    if not is_update_required(installed, latest.version):
        log.debug(f"already on latest version: {installed}")
        return UpdateCheck(UpdateStatus.UP_TO_DATE, latest_release=latest, current_version=installed)

    version = str(latest.version)
    info = UpdateInfo(
        package=package,
        current_version=installed,
        latest_release=latest,
        download_url=build_download_url(package, version, url_template),
    )
    return UpdateCheck(
        UpdateStatus.AVAILABLE,
        latest_release=latest,
        current_version=installed,
        update_info=info,
    )


def start_update(update_info: UpdateInfo, directory: Union[str, Path]) -> bool:
    """설치 실행. 성공 여부 반환."""
    return apply_update(update_info.package, update_info.download_url, directory)
