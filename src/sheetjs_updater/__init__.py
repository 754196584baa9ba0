# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""SheetJS 의존성 업데이터"""

from .__about__ import __version__

__all__ = ["__version__"]
