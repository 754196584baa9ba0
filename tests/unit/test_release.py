# SPDX-License-Identifier: MIT
"""Release 변환/선택 단위 테스트."""

import pytest

from sheetjs_updater.updater.errors import ParseError
from sheetjs_updater.updater.feed_client import FeedItem
from sheetjs_updater.updater.release import Release, find_latest_release, to_releases
from sheetjs_updater.updater.version import Version


@pytest.fixture
def feed_items():
    return [
        FeedItem(title="0.0.0", link="https://example.com/0.0.0"),
        FeedItem(title="1.0.0", link="https://example.com/1.0.0"),
        FeedItem(title="v1.1.0", link="https://example.com/v1.1.0"),
        FeedItem(title="1.1.0-a", link="https://example.com/1.1.0-a"),
    ]


class TestToReleases:
    """to_releases 함수 테스트."""

    def test_convert_preserves_order(self, feed_items):
        releases = to_releases(feed_items)

        assert len(releases) == 4
        assert releases[0] == Release(Version(0, 0, 0), "https://example.com/0.0.0")
        assert releases[1] == Release(Version(1, 0, 0), "https://example.com/1.0.0")
        assert releases[2] == Release(Version(1, 1, 0), "https://example.com/v1.1.0")
        assert releases[3].version == Version(1, 1, 0, ("a",))
        assert releases[3].link == "https://example.com/1.1.0-a"

    def test_empty(self):
        assert to_releases([]) == []

    def test_invalid_title_fails_fast(self, feed_items):
        """기본 동작: 첫 파싱 실패에서 중단."""
        feed_items.insert(1, FeedItem(title="nightly", link="https://example.com/nightly"))

        with pytest.raises(ParseError) as exc_info:
            to_releases(feed_items)
        assert exc_info.value.raw == "nightly"

    def test_invalid_title_skipped(self, feed_items):
        """skip_invalid=True면 건너뛰고 계속."""
        feed_items.insert(1, FeedItem(title="nightly", link="https://example.com/nightly"))

        releases = to_releases(feed_items, skip_invalid=True)

        assert [r.link for r in releases] == [
            "https://example.com/0.0.0",
            "https://example.com/1.0.0",
            "https://example.com/v1.1.0",
            "https://example.com/1.1.0-a",
        ]

    def test_accepts_generator(self, feed_items):
        releases = to_releases(item for item in feed_items)
        assert len(releases) == 4


class TestFindLatestRelease:
    """find_latest_release 함수 테스트."""

    def test_release_beats_its_prerelease(self, feed_items):
        """정식 릴리스가 같은 번호의 프리릴리스보다 높음."""
        latest = find_latest_release(to_releases(feed_items))

        assert latest == Release(Version(1, 1, 0), "https://example.com/v1.1.0")

    def test_order_independent(self, feed_items):
        latest = find_latest_release(to_releases(reversed(feed_items)))
        assert latest.link == "https://example.com/v1.1.0"

    def test_prerelease_ordering(self):
        releases = [
            Release(Version(1, 1, 0, ("a",)), "a"),
            Release(Version(1, 1, 0, ("b",)), "b"),
            Release(Version(1, 0, 0), "old"),
        ]
        assert find_latest_release(releases).link == "b"

    def test_tie_returns_one_of_them(self):
        """build만 다른 동일 버전은 어느 쪽이든 허용."""
        releases = [
            Release(Version(2, 0, 0, (), ("x",)), "x"),
            Release(Version(2, 0, 0, (), ("y",)), "y"),
        ]
        assert find_latest_release(releases).link in {"x", "y"}

    def test_empty(self):
        assert find_latest_release([]) is None
