# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""package.json에서 설치된 버전 추출

의존성 값은 CDN tarball URL로 가정한다:
    https://cdn.sheetjs.com/xlsx-0.19.3/xlsx-0.19.3.tgz
'/'로 나눈 4번째 조각(xlsx-0.19.3)의 '-' 뒤 두 번째 조각이 버전.
"""

import json
import re
from pathlib import Path
from typing import Callable, Optional, Union

from .errors import MalformedDependencyUrl, ManifestError
from .version import Version, parse_version
from ..config import MANIFEST_FILENAME
from ..utils.debug import get_logger

log = get_logger("Manifest")

# URL → 버전 토큰
VersionTokenExtractor = Callable[[str], str]


def positional_version_token(url: str) -> str:
    """URL 위치 규칙으로 버전 토큰 추출.

    Raises:
        MalformedDependencyUrl: '/' 조각이 4개 미만이거나 '-' 조각이 2개 미만
    """
    segments = url.split("/")
    if len(segments) < 4:
        raise MalformedDependencyUrl(url, f"expected at least 4 '/' segments, got {len(segments)}")

    pieces = segments[3].split("-")
    if len(pieces) < 2:
        raise MalformedDependencyUrl(url, f"no version piece in {segments[3]!r}")
    return pieces[1]


def pattern_version_token(pattern: Union[str, re.Pattern]) -> VersionTokenExtractor:
    """정규식 캡처로 버전 토큰을 뽑는 추출기 생성.

    `version` 이름 그룹이 있으면 그것을, 없으면 첫 번째 그룹을 사용.
    """
    compiled = re.compile(pattern)

    def extract(url: str) -> str:
        match = compiled.search(url)
        if not match:
            raise MalformedDependencyUrl(url, f"does not match {compiled.pattern!r}")
        if "version" in compiled.groupindex:
            return match.group("version")
        return match.group(1)

    return extract


def extract_installed_version(
    dependency_value: Optional[str],
    token_extractor: VersionTokenExtractor = positional_version_token,
) -> Optional[Version]:
    """의존성 값에서 설치된 Version 추출.

    Args:
        dependency_value: package.json 의존성 값. 없으면 None
        token_extractor: URL → 버전 토큰 규칙

    Returns:
        Version 또는 None (의존성 미선언일 때만)

    Raises:
        MalformedDependencyUrl: URL 형식 불일치
        ParseError: 토큰이 버전 형식이 아님
    """
    if dependency_value is None:
        return None

    token = token_extractor(dependency_value)
    log.trace(f"version token {token!r} from {dependency_value!r}")
    return parse_version(token)


def read_manifest(directory: Union[str, Path]) -> dict:
    """<directory>/package.json 로드.

    Raises:
        ManifestError: 파일 없음, 읽기 실패, JSON 오류, 최상위가 객체 아님
    """
    path = Path(directory) / MANIFEST_FILENAME
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(path, "file not found") from e
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON: {e}") from e
    except OSError as e:
        raise ManifestError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")

    log.debug(f"manifest loaded: {path}")
    return data


def get_dependency_value(manifest: dict, package: str) -> Optional[str]:
    """dependencies[package] 문자열 값. 없거나 문자열이 아니면 None."""
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        return None

    value = dependencies.get(package)
    if not isinstance(value, str):
        return None
    return value


def get_current_version(
    directory: Union[str, Path],
    package: str,
    token_extractor: VersionTokenExtractor = positional_version_token,
) -> Optional[Version]:
    """디렉토리의 package.json에서 package의 설치 버전 조회."""
    manifest = read_manifest(directory)
    value = get_dependency_value(manifest, package)
    if value is None:
        log.debug(f"{package} not declared in dependencies")
        return None
    return extract_installed_version(value, token_extractor)
