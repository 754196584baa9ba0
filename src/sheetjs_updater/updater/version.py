# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""시맨틱 버전 파싱/비교

피드 제목("v0.20.2")이나 CDN URL 토큰("0.19.3")처럼 사람이 쓴 버전 문자열을
Version으로 정규화한다.

허용 문법:
    [접두어] MAJOR[.MINOR[.PATCH]] [-PRERELEASE] [+BUILD]

- 접두어: 숫자가 아닌 선행 문자열 한 덩어리 ("v", "release-" 등). 제거됨.
- MINOR/PATCH 누락 시 0.
- BUILD는 첫 '+' 뒤, PRERELEASE는 그 앞부분의 첫 '-' 뒤.
- 식별자는 '.'으로 구분, [0-9A-Za-z-]만 허용, 빈 식별자 불가.
"""

import functools
import re
from dataclasses import dataclass
from typing import Tuple

from .errors import ParseError

_LEADING_MARKER = re.compile(r"^[^0-9]+")
_NUMERIC = re.compile(r"^[0-9]+$")
_IDENTIFIER = re.compile(r"^[0-9A-Za-z-]+$")


def _identifier_key(identifier: str) -> Tuple[int, int, str]:
    # 숫자 식별자는 숫자 비교, 문자 식별자보다 항상 앞
    if _NUMERIC.match(identifier):
        return (0, int(identifier), "")
    return (1, 0, identifier)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """불변 버전 값. build는 비교/동등성/해시에서 무시된다."""

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        # list 등으로 넘어와도 튜플로 고정
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _key(self) -> tuple:
        if self.is_prerelease:
            pre = (0, tuple(_identifier_key(i) for i in self.prerelease))
        else:
            # 정식 릴리스 > 같은 번호의 프리릴리스
            pre = (1, ())
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.is_prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def _split_identifiers(raw: str, segment: str, label: str) -> Tuple[str, ...]:
    identifiers = tuple(segment.split("."))
    for identifier in identifiers:
        if not _IDENTIFIER.match(identifier):
            raise ParseError(raw, f"invalid {label} identifier {identifier!r}")
    return identifiers


def parse_version(raw: str) -> Version:
    """버전 문자열을 Version으로 변환.

    Args:
        raw: 'v0.20.2', '0.19.3', '1.1.0-a', '1.2' 등

    Returns:
        Version

    Raises:
        ParseError: 접두어 제거 후 숫자 major로 시작하지 않거나 문법 위반
    """
    if not isinstance(raw, str):
        raise ParseError(repr(raw), "expected a string")

    text = _LEADING_MARKER.sub("", raw.strip(), count=1)
    if not text:
        raise ParseError(raw, "missing numeric major version")

    text, has_build, build_part = text.partition("+")
    core, has_pre, pre_part = text.partition("-")

    components = core.split(".")
    if len(components) > 3:
        raise ParseError(raw, "more than three numeric components")
    for component in components:
        if not _NUMERIC.match(component):
            raise ParseError(raw, f"non-numeric version component {component!r}")
    numbers = [int(c) for c in components] + [0] * (3 - len(components))

    prerelease = _split_identifiers(raw, pre_part, "prerelease") if has_pre else ()
    build = _split_identifiers(raw, build_part, "build") if has_build else ()

    return Version(numbers[0], numbers[1], numbers[2], prerelease, build)

