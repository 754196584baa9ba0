# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""설정값 정의"""

from pathlib import Path


# =============================================================================
# 앱 정보
# =============================================================================

APP_DISPLAY_NAME = "SheetJS 업데이터"
USER_AGENT = "SheetJS-Updater"

# 사용자 설정/로그 디렉토리
APP_DATA_DIR = Path.home() / ".sheetjs_updater"

# =============================================================================
# 릴리스 피드
# =============================================================================

DEFAULT_FEED_URL = "https://git.sheetjs.com/sheetjs/sheetjs/tags.rss"
FEED_TIMEOUT = 15  # 초

# =============================================================================
# 의존성 / 설치
# =============================================================================

DEFAULT_PACKAGE = "xlsx"
MANIFEST_FILENAME = "package.json"

# 설치 URL 형식: https://cdn.sheetjs.com/xlsx-0.19.3/xlsx-0.19.3.tgz
CDN_URL_TEMPLATE = "https://cdn.sheetjs.com/{package}-{version}/{package}-{version}.tgz"

NPM_EXECUTABLE = "npm"
NPM_TIMEOUT = 300  # 초
