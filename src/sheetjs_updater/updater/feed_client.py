# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""릴리스 피드(RSS/Atom) 클라이언트"""

import urllib.error
import urllib.request
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import List, Optional

from .errors import FeedError
from ..config import FEED_TIMEOUT, USER_AGENT
from ..utils.debug import get_logger

log = get_logger("FeedClient")

ATOM_NS = "{http://www.w3.org/2005/Atom}"


@dataclass(frozen=True)
class FeedItem:

    title: str
    link: str


def _text(node: Optional[ET.Element]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.strip()


def _rss_items(root: ET.Element) -> List[tuple]:
    return [
        (_text(item.find("title")), _text(item.find("link")))
        for item in root.iter("item")
    ]


def _atom_entries(root: ET.Element) -> List[tuple]:
    entries = []
    for entry in root.iter(f"{ATOM_NS}entry"):
        link = ""
        for link_node in entry.findall(f"{ATOM_NS}link"):
            # rel 없으면 alternate
            if link_node.get("rel", "alternate") == "alternate":
                link = link_node.get("href", "").strip()
                break
        entries.append((_text(entry.find(f"{ATOM_NS}title")), link))
    return entries


def parse_feed(content: bytes, url: str = "<feed>") -> List[FeedItem]:
    """피드 본문에서 (title, link) 항목 추출.

    Args:
        content: XML 본문
        url: 오류 메시지용 출처

    Returns:
        피드 순서대로 FeedItem 리스트

    Raises:
        FeedError: XML 파싱 실패 또는 RSS/Atom이 아닌 문서
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise FeedError(url, f"invalid XML: {e}") from e

    if root.tag == "rss":
        raw_items = _rss_items(root)
    elif root.tag == f"{ATOM_NS}feed":
        raw_items = _atom_entries(root)
    else:
        raise FeedError(url, f"unsupported feed root {root.tag!r}")

    items = []
    for title, link in raw_items:
        if not title or not link:
            log.warning(f"feed item without title/link skipped: title={title!r} link={link!r}")
            continue
        items.append(FeedItem(title=title, link=link))
    return items


def get_feed_items(url: str) -> Optional[List[FeedItem]]:
    """피드 조회 후 항목 반환.

    Returns:
        FeedItem 리스트 또는 None (네트워크 오류)

    Raises:
        FeedError: 응답이 올바른 피드가 아님
    """
    headers = {
        "Accept": "application/rss+xml, application/atom+xml, application/xml",
        "User-Agent": USER_AGENT,
    }

    try:
        req = urllib.request.Request(url, headers=headers)
        with urllib.request.urlopen(req, timeout=FEED_TIMEOUT) as response:
            content = response.read()
    except urllib.error.HTTPError as e:
        log.warning(f"feed request failed: HTTP {e.code}")
        return None
    except urllib.error.URLError as e:
        log.warning(f"network error: {e.reason}")
        return None
    except TimeoutError:
        log.warning(f"feed request timed out after {FEED_TIMEOUT}s")
        return None
    except Exception as e:
        log.error(f"feed request failed: {e}")
        return None

    items = parse_feed(content, url)
    log.debug(f"{len(items)} feed items from {url}")
    return items
