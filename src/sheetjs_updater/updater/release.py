# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""피드 항목 → 릴리스 변환 및 최신 릴리스 선택"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import ParseError
from .feed_client import FeedItem
from .version import Version, parse_version
from ..utils.debug import get_logger

log = get_logger("Release")


@dataclass(frozen=True)
class Release:

    version: Version
    link: str


def to_releases(items: Iterable[FeedItem], skip_invalid: bool = False) -> List[Release]:
    """피드 항목을 입력 순서대로 Release로 변환.

    Args:
        items: 피드 항목 (title, link)
        skip_invalid: True면 파싱 불가 제목은 경고 후 건너뜀.
            False(기본)면 첫 실패에서 ParseError 전파.

    Returns:
        Release 리스트
    """
    releases = []
    for item in items:
        try:
            version = parse_version(item.title)
        except ParseError as e:
            if not skip_invalid:
                raise
            log.warning(f"skipping feed item {item.title!r} ({item.link}): {e.reason}")
            continue
        log.trace(f"release {version} <- {item.title!r}")
        releases.append(Release(version=version, link=item.link))
    return releases


def find_latest_release(releases: Iterable[Release]) -> Optional[Release]:
    """버전이 가장 높은 릴리스. 비어 있으면 None."""
    return max(releases, key=lambda r: r.version, default=None)
