# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""업데이터 예외. 모두 UpdaterError를 상속, CLI에서 한 번에 처리."""


class UpdaterError(Exception):
    pass


class ParseError(UpdaterError, ValueError):
    """버전 문자열이 문법에 맞지 않음."""

    def __init__(self, raw: str, reason: str = "not a valid version"):
        self.raw = raw
        self.reason = reason
        super().__init__(f"cannot parse version {raw!r}: {reason}")


class MalformedDependencyUrl(UpdaterError, ValueError):
    """의존성 URL에서 버전 토큰 위치를 찾을 수 없음."""

    def __init__(self, value: str, reason: str = "unexpected URL shape"):
        self.value = value
        self.reason = reason
        super().__init__(f"malformed dependency URL {value!r}: {reason}")


class ManifestError(UpdaterError):
    """package.json 읽기/해석 실패."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read manifest {path}: {reason}")


class FeedError(UpdaterError):
    """릴리스 피드 조회/해석 실패."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"cannot read feed {url}: {reason}")
