# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""python -m sheetjs_updater 런처"""
import sys

from sheetjs_updater.main import main

if __name__ == "__main__":
    sys.exit(main())
